"""
Custom model fields.
"""

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.functional import cached_property

from core.utils.addressing import U64_MAX

_SIGNED_LIMIT = 2**63


class UnsignedBigIntegerField(models.BigIntegerField):
    """
    Unsigned 64-bit integer stored in a signed BIGINT column.

    Values at or above 2**63 are stored in two's complement form, so the full
    unsigned range round-trips and equality lookups work. Database ordering
    of values at or above 2**63 is not numeric.
    """

    description = "Unsigned big (8 byte) integer"

    @cached_property
    def validators(self):
        return [MinValueValidator(0), MaxValueValidator(U64_MAX), *self._validators]

    def get_prep_value(self, value):
        value = super().get_prep_value(value)
        if value is not None and value >= _SIGNED_LIMIT:
            value -= 2**64
        return value

    def from_db_value(self, value, expression, connection):
        if value is not None and value < 0:
            value += 2**64
        return value

    def formfield(self, **kwargs):
        return super().formfield(**{"min_value": 0, "max_value": U64_MAX, **kwargs})
