# counter/views.py
from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidOperation
from .serializers import CounterSerializer, UpdateCounterSerializer
from .services import get_counter, update_counter
import logging

logger = logging.getLogger(__name__)


class CounterView(APIView):
    """getCounter: return the counter, creating it on first use."""

    def get(self, request):
        counter = get_counter()
        return Response(CounterSerializer(counter).data)


class UpdateCounterView(APIView):
    """updateCounter: apply an increment or decrement and return the result."""

    def post(self, request):
        serializer = UpdateCounterSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Invalid counter update payload: {serializer.errors}")
            raise InvalidOperation(serializer.errors)

        counter = update_counter(serializer.validated_data['operation'])
        return Response(CounterSerializer(counter).data)


@api_view(['GET'])
def health_check(request):
    return Response({
        'status': 'ok',
        'timestamp': timezone.now(),
    })
