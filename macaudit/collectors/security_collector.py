from __future__ import annotations

import getpass
import logging

from macaudit.collectors.base import BaseCollector, CommandRunner
from macaudit.models.security import FirewallState, ScreenLock, SecurityPosture

logger = logging.getLogger(__name__)

ALF_PREFS = "/Library/Preferences/com.apple.alf"
UPDATE_PREFS = "/Library/Preferences/com.apple.SoftwareUpdate"
LOGIN_PREFS = "/Library/Preferences/com.apple.loginwindow"
POLICY_PREFS = "/var/db/SystemPolicy-prefs.plist"
SCREENSAVER = "com.apple.screensaver"
PROFILE_NAME_MARKER = "attribute: name:"


def parse_firewall_state(value: str | None) -> FirewallState:
    # 1 = on for specific services, 2 = on for essential services
    if value in ("1", "2"):
        return FirewallState.ENABLED
    if value == "0":
        return FirewallState.DISABLED
    return FirewallState.UNKNOWN


def parse_profile_names(text: str | None) -> list[str]:
    names: list[str] = []
    for line in (text or "").splitlines():
        if PROFILE_NAME_MARKER in line:
            names.append(line.split(PROFILE_NAME_MARKER, 1)[1].strip())
    return names


class SecurityCollector(BaseCollector):
    """Reads the security settings that make up the posture score.

    Every setting is read by its own query; an unreadable setting counts as
    not enabled.
    """

    name = "security"

    def __init__(
        self,
        architecture: str,
        runner: CommandRunner | None = None,
    ) -> None:
        super().__init__(runner)
        self.architecture = architecture

    def collect(self) -> SecurityPosture:
        posture = SecurityPosture(
            sip_enabled="enabled" in (self.query("csrutil", "status") or ""),
            firewall=parse_firewall_state(self.read_default(ALF_PREFS, "globalstate")),
            stealth_mode=self.read_default(ALF_PREFS, "stealthenabled") == "1",
            gatekeeper_status=self.query("spctl", "--status"),
            gatekeeper_policy_enforced="yes" in (self.read_default(POLICY_PREFS, "enabled") or ""),
            auto_check=self.read_default(UPDATE_PREFS, "AutomaticCheckEnabled") == "1",
            auto_download=self.read_default(UPDATE_PREFS, "AutomaticDownload") == "1",
            auto_install=self.read_default(UPDATE_PREFS, "AutomaticallyInstallMacOSUpdates") == "1",
            screen_lock=self._screen_lock(),
            auto_login_user=self.read_default(LOGIN_PREFS, "autoLoginUser"),
        )
        self._fill_filevault(posture)
        self._fill_accounts(posture)
        self._fill_enrollment(posture)
        return posture

    def _fill_filevault(self, posture: SecurityPosture) -> None:
        posture.filevault_on = "FileVault is On" in (self.query("fdesetup", "status") or "")
        if posture.filevault_on:
            users = self.query("fdesetup", "list")
            posture.filevault_users = len(users.splitlines()) if users else 0

    def _screen_lock(self) -> ScreenLock:
        if self.architecture == "arm64":
            return ScreenLock(apple_silicon=True)
        return ScreenLock(
            idle_time=self.query("defaults", "-currentHost", "read", SCREENSAVER, "idleTime"),
            ask_for_password=self.read_default(SCREENSAVER, "askForPassword") == "1",
            password_delay=self.read_default(SCREENSAVER, "askForPasswordDelay") or "0",
        )

    def _fill_accounts(self, posture: SecurityPosture) -> None:
        membership = self.query("dscl", ".", "-read", "/Groups/admin", "GroupMembership")
        if membership:
            # first word is the "GroupMembership:" label
            posture.admin_count = max(len(membership.split()) - 1, 0)

        try:
            posture.current_user = getpass.getuser()
        except (KeyError, OSError):
            logger.debug("Current user unavailable", exc_info=True)
            return
        groups = self.query("groups", posture.current_user)
        if groups is not None:
            posture.current_user_is_admin = "admin" in groups.split()

    def _fill_enrollment(self, posture: SecurityPosture) -> None:
        status = self.query("profiles", "status", "-type", "enrollment") or ""
        posture.dep_enrolled = "Enrolled via DEP: Yes" in status
        posture.mdm_enrolled = "MDM enrollment: Yes" in status
        posture.profiles = parse_profile_names(self.query("profiles", "list"))
