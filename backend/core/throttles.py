"""
Rate limiting throttles for Django REST Framework.

Provides per-operation scopes for the ledger write endpoints. Rates are
configured in REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]; the
DISABLE_RATE_LIMITING setting turns every throttle off.
"""

from django.conf import settings
from rest_framework.throttling import AnonRateThrottle, UserRateThrottle


class RateLimitSwitchMixin:
    """Mixin that honours the DISABLE_RATE_LIMITING setting."""

    def allow_request(self, request, view):
        if getattr(settings, "DISABLE_RATE_LIMITING", False):
            return True

        return super().allow_request(request, view)


class SwitchableAnonRateThrottle(RateLimitSwitchMixin, AnonRateThrottle):
    """Anonymous rate throttle that can be switched off in settings."""

    pass


class SwitchableUserRateThrottle(RateLimitSwitchMixin, UserRateThrottle):
    """User rate throttle that can be switched off in settings."""

    pass


class PollCreateRateThrottle(SwitchableUserRateThrottle):
    scope = "poll_create"


class CandidateCreateRateThrottle(SwitchableUserRateThrottle):
    scope = "candidate_create"


class VoteCastRateThrottle(SwitchableUserRateThrottle):
    scope = "vote_cast"
