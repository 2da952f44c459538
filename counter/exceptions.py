# counter/exceptions.py
from rest_framework import status
from rest_framework.exceptions import APIException


class StoreUnavailable(APIException):
    """
    The counter table could not be reached, or a query/mutation on it failed.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Counter store is unavailable.'
    default_code = 'store_unavailable'


class InvalidOperation(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Operation must be "increment" or "decrement".'
    default_code = 'invalid_operation'
