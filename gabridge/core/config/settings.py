"""Google Analytics dispatch settings.

All defaults are defined here in the schema. Uses Pydantic Settings for
automatic env var loading; the instance stays mutable afterwards and every
dispatch reads it at call time.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gabridge.core.config.enums import USER_ID_TOGGLE, HitType, Transport


def _default_hit_types() -> Dict[str, bool]:
    return {
        HitType.PAGEVIEW.value: True,
        HitType.EVENT.value: True,
        HitType.EXCEPTION.value: False,
        HitType.TIMING.value: False,
        HitType.SET_USER_PROPERTIES.value: False,
        USER_ID_TOGGLE: False,
    }


class GoogleAnalyticsSettings(BaseSettings):
    """Settings shared by every tracker operation.

    Env vars use the ``GA_`` prefix; list and dict fields take JSON:
        GA_ADDITIONAL_ACCOUNT_NAMES='["foo", "bar"]'
        GA_ADDITIONAL_ACCOUNT_HIT_TYPES='{"pageview": true, "userId": true}'
    """

    model_config = SettingsConfigDict(
        env_prefix="GA_",
        extra="ignore",
        validate_assignment=True,
    )

    disable_page_tracking: bool = Field(False, description="Drop every pageview")
    disable_event_tracking: bool = Field(False, description="Drop every event")
    additional_account_names: List[str] = Field(
        default_factory=list, description="Named trackers that receive copies of hits"
    )
    additional_account_hit_types: Dict[str, bool] = Field(
        default_factory=_default_hit_types,
        description="Hit types copied to additional accounts, plus the userId toggle",
    )
    enhanced_ecommerce: bool = Field(False, description="Use the 'ec' plugin for transactions")
    transport: Optional[Transport] = Field(None, description="Transport set on every hit")
    user_id: Optional[str] = Field(None, description="User ID attached to every hit")

    @field_validator("additional_account_names", mode="before")
    @classmethod
    def _none_means_no_accounts(cls, value: Any) -> Any:
        return [] if value is None else value

    def should_copy(self, key: str) -> bool:
        """Return whether the replication toggle ``key`` is on. Absent means off."""
        return bool(self.additional_account_hit_types.get(key, False))
