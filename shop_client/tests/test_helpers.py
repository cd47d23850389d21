import time
import unittest
from unittest import mock

from shop_client.helpers import (
    Debouncer,
    custom_request_message,
    format_price,
    generate_slug,
    get_whatsapp_url,
    sculpture_inquiry_message,
    validate_email,
    validate_mobile_number,
)


class FormatPriceTests(unittest.TestCase):
    def test_indian_grouping(self):
        self.assertEqual(format_price(125000), "₹1,25,000")
        self.assertEqual(format_price(10000000), "₹1,00,00,000")
        self.assertEqual(format_price(999), "₹999")
        self.assertEqual(format_price(1000), "₹1,000")

    def test_rounds_to_whole_rupees(self):
        self.assertEqual(format_price("45000.50"), "₹45,001")
        self.assertEqual(format_price(45000.49), "₹45,000")

    def test_bad_input_is_zero(self):
        self.assertEqual(format_price(None), "₹0")
        self.assertEqual(format_price("abc"), "₹0")

    def test_negative(self):
        self.assertEqual(format_price(-150000), "-₹1,50,000")


class TextHelperTests(unittest.TestCase):
    def test_generate_slug(self):
        self.assertEqual(generate_slug("Lord Ganesha"), "lord-ganesha")
        self.assertEqual(generate_slug("  Dancing  Nataraja!! "), "dancing-nataraja")
        self.assertEqual(generate_slug("stone_bull -- large"), "stone-bull-large")
        self.assertEqual(generate_slug(""), "")

    def test_mobile_numbers(self):
        self.assertTrue(validate_mobile_number("9876543210"))
        self.assertTrue(validate_mobile_number("98765 43210"))
        self.assertFalse(validate_mobile_number("5876543210"))
        self.assertFalse(validate_mobile_number("987654321"))
        self.assertFalse(validate_mobile_number("+919876543210"))

    def test_email(self):
        self.assertTrue(validate_email("ravi@example.com"))
        self.assertFalse(validate_email("ravi@example"))
        self.assertFalse(validate_email("ravi example.com"))

    def test_whatsapp_url(self):
        url = get_whatsapp_url("+91 91599-48127", "Hi there!")

        self.assertEqual(url, "https://wa.me/919159948127?text=Hi%20there!")

    def test_whatsapp_url_encodes_newlines(self):
        url = get_whatsapp_url("919000000000", "a\nb & c")

        self.assertEqual(url, "https://wa.me/919000000000?text=a%0Ab%20%26%20c")

    def test_inquiry_message(self):
        message = sculpture_inquiry_message("Ravi", "9876543210", [
            {"name": "Lord Ganesha", "price": 45000},
            {"name": "Nandi", "price": 125000},
        ])

        self.assertIn("1. Lord Ganesha - ₹45,000\n2. Nandi - ₹1,25,000", message)
        self.assertIn("Name: Ravi\nMobile: 9876543210", message)
        self.assertTrue(message.startswith("Hello! I'm interested in the following sculptures:"))

    def test_custom_request_message(self):
        message = custom_request_message("Meena", "9123456789", "Bust", "Bronze", "60 cm", "35000", "Grandfather")

        self.assertIn("Type: Bust\nMaterial: Bronze\nDimensions: 60 cm\nBudget: 35000", message)
        self.assertTrue(message.endswith("Please contact me to discuss further."))


class DebouncerTests(unittest.TestCase):
    def test_flush_runs_last_call_once(self):
        func = mock.Mock()
        debounced = Debouncer(func, wait=10)

        debounced("g")
        debounced("ga")
        debounced("gan")
        self.assertTrue(debounced.pending)
        debounced.flush()

        func.assert_called_once_with("gan")
        self.assertFalse(debounced.pending)

    def test_cancel_drops_pending_call(self):
        func = mock.Mock()
        debounced = Debouncer(func, wait=10)

        debounced("x")
        debounced.cancel()
        debounced.flush()

        func.assert_not_called()

    def test_timer_fires_after_wait(self):
        func = mock.Mock()
        debounced = Debouncer(func, wait=0.01)

        debounced("ganesha")
        for _ in range(200):
            if func.called:
                break
            time.sleep(0.01)

        func.assert_called_once_with("ganesha")

    def test_superseded_timer_does_not_run_newer_call(self):
        func = mock.Mock()
        debounced = Debouncer(func, wait=10)

        debounced("gan")
        stale_generation = debounced._generation
        debounced("ganesha")
        # The first timer's callback was already running when the second call arrived
        debounced._fire_scheduled(stale_generation)

        func.assert_not_called()
        self.assertTrue(debounced.pending)

        debounced._fire_scheduled(debounced._generation)

        func.assert_called_once_with("ganesha")
        self.assertFalse(debounced.pending)
