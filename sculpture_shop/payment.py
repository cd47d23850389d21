import logging

from rest_framework.views import APIView

from .procedures import call_procedure
from .serializers import PaymentInfoSerializer
from .utilities import _ok, _server_error

logger = logging.getLogger(__name__)


class PaymentInfoAPIView(APIView):
    def get(self, request):
        try:
            data = PaymentInfoSerializer(call_procedure("sp_get_payment_info"), many=True).data
        except Exception as e:
            logger.exception("Error getting payment info")
            return _server_error(e, "Failed to retrieve payment info")
        return _ok("Payment info retrieved successfully", data)
