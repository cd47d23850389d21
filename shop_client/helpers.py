# Standard Library
import re
import threading
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from urllib.parse import quote

_SLUG_STRIP = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)
_MOBILE = re.compile(r"^[6-9]\d{9}$", re.ASCII)
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


class Debouncer:
    """
    Calls `func` once, `wait` seconds after the most recent call, with that
    call's arguments. Every call cancels the pending timer and starts a new one.
    """

    def __init__(self, func, wait):
        self.func = func
        self.wait = wait
        self._lock = threading.Lock()
        self._timer = None
        self._pending = None
        self._generation = 0

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = threading.Timer(self.wait, self._fire_scheduled, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self):
        return self._pending is not None

    def _take(self, generation=None):
        with self._lock:
            # A timer that was already running when a newer call replaced it
            if generation is not None and generation != self._generation:
                return None
            if self._timer is not None:
                self._timer.cancel()
            pending, self._pending, self._timer = self._pending, None, None
        return pending

    def _run(self, pending):
        if pending is not None:
            args, kwargs = pending
            self.func(*args, **kwargs)

    def _fire_scheduled(self, generation):
        self._run(self._take(generation))

    def flush(self):
        """Run the pending call now, if any."""
        self._run(self._take())

    def cancel(self):
        self._take()


def _group_indian(digits):
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_price(price):
    """Whole rupees with Indian digit grouping: 125000 -> "₹1,25,000"."""
    try:
        amount = Decimal(str(price if price is not None else 0))
    except InvalidOperation:
        amount = Decimal("0")
    if not amount.is_finite():
        amount = Decimal("0")
    amount = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(int(amount))))}"


def generate_slug(text):
    text = _SLUG_STRIP.sub("", (text or "").lower().strip())
    return _SLUG_SEPARATORS.sub("-", text).strip("-")


def validate_mobile_number(mobile):
    return bool(_MOBILE.match(re.sub(r"\s", "", mobile or "")))


def validate_email(email):
    return bool(_EMAIL.match(email or ""))


def get_whatsapp_url(phone_number, message):
    clean_number = re.sub(r"\D", "", phone_number or "")
    return f"https://wa.me/{clean_number}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


def sculpture_inquiry_message(customer_name, mobile_number, sculptures):
    lines = "\n".join(
        f"{i}. {s['name']} - {format_price(s.get('price'))}" for i, s in enumerate(sculptures, start=1)
    )
    return (
        "Hello! I'm interested in the following sculptures:\n"
        "\n"
        f"{lines}\n"
        "\n"
        "*Customer Details:*\n"
        f"Name: {customer_name}\n"
        f"Mobile: {mobile_number}\n"
        "\n"
        "Please provide more information and availability."
    )


def custom_request_message(customer_name, mobile_number, sculpture_type, material, dimensions, budget, description):
    return (
        "Hello! I would like to request a custom sculpture.\n"
        "\n"
        "*Customer Details:*\n"
        f"Name: {customer_name}\n"
        f"Mobile: {mobile_number}\n"
        "\n"
        "*Sculpture Requirements:*\n"
        f"Type: {sculpture_type}\n"
        f"Material: {material}\n"
        f"Dimensions: {dimensions}\n"
        f"Budget: {budget}\n"
        "\n"
        "*Description:*\n"
        f"{description}\n"
        "\n"
        "Please contact me to discuss further."
    )
