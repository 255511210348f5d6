from .errors import error_response
from .money import CENT, ZERO, money_context, to_cents, to_count, to_decimal, to_non_negative
