from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Tortoise hands DecimalField values back normalized (2500.00 -> 2.5E+3);
# the API always writes money as a plain two-place string.
Money = Annotated[Decimal, PlainSerializer(lambda v: f"{v:.2f}", return_type=str, when_used="json")]
