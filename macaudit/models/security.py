from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

MAX_SECURITY_SCORE = 8


class FirewallState(StrEnum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    UNKNOWN = "unknown"


class ScreenLock(BaseModel):
    apple_silicon: bool = False
    idle_time: str | None = None
    ask_for_password: bool = False
    password_delay: str | None = None

    @property
    def password_required(self) -> bool:
        # Apple Silicon always requires the password after sleep/wake.
        return self.apple_silicon or self.ask_for_password


class SecurityPosture(BaseModel):
    """Security settings of the host and the derived posture score."""

    sip_enabled: bool = False
    filevault_on: bool = False
    filevault_users: int | None = None
    firewall: FirewallState = FirewallState.UNKNOWN
    stealth_mode: bool = False
    gatekeeper_status: str | None = None
    gatekeeper_policy_enforced: bool = False
    auto_check: bool = False
    auto_download: bool = False
    auto_install: bool = False
    screen_lock: ScreenLock = Field(default_factory=ScreenLock)
    admin_count: int | None = None
    current_user: str | None = None
    current_user_is_admin: bool | None = None
    auto_login_user: str | None = None
    dep_enrolled: bool = False
    mdm_enrolled: bool = False
    profiles: list[str] = Field(default_factory=list)

    @property
    def gatekeeper_enabled(self) -> bool:
        return "enabled" in (self.gatekeeper_status or "")

    @property
    def checks(self) -> dict[str, bool]:
        """The scored checks, each derived from its own condition."""
        return {
            "sip": self.sip_enabled,
            "filevault": self.filevault_on,
            "firewall": self.firewall == FirewallState.ENABLED,
            "stealth_mode": self.stealth_mode,
            "gatekeeper": self.gatekeeper_enabled,
            "automatic_updates": self.auto_check,
            "screen_lock": self.screen_lock.password_required,
            "no_automatic_login": not self.auto_login_user,
        }

    @property
    def score(self) -> int:
        return sum(1 for passed in self.checks.values() if passed)

    @property
    def max_score(self) -> int:
        return MAX_SECURITY_SCORE

    @property
    def managed(self) -> bool:
        return self.dep_enrolled or self.mdm_enrolled or bool(self.profiles)
