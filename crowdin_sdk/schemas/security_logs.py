"""Security Log Schemas — account security events and their filters."""

from enum import Enum

from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListOptions, ListResponse


class LogEvent(str, Enum):
    LOGIN = "login"
    PASSWORD_SET = "password.set"
    PASSWORD_CHANGE = "password.change"
    EMAIL_CHANGE = "email.change"
    LOGIN_CHANGE = "login.change"
    PERSONAL_TOKEN_ISSUED = "personal_token.issued"
    PERSONAL_TOKEN_REVOKED = "personal_token.revoked"
    MFA_ENABLED = "mfa.enabled"
    MFA_DISABLED = "mfa.disabled"
    SESSION_REVOKE = "session.revoke"
    SESSION_REVOKE_ALL = "session.revoke_all"
    SSO_CONNECT = "sso.connect"
    SSO_DISCONNECT = "sso.disconnect"
    USER_REGISTERED = "user.registered"
    USER_REMOVE = "user.remove"
    APPLICATION_CONNECTED = "application.connected"
    APPLICATION_DISCONNECTED = "application.disconnected"
    WEBAUTHN_CREATED = "webauthn.created"
    WEBAUTHN_DELETED = "webauthn.deleted"
    TRUSTED_DEVICE_REMOVE = "trusted_device.remove"
    TRUSTED_DEVICE_REMOVE_ALL = "trusted_device.remove_all"
    DEVICE_VERIFICATION_ENABLED = "device_verification.enabled"
    DEVICE_VERIFICATION_DISABLED = "device_verification.disabled"


class SecurityLog(CrowdinModel):
    id: int = 0
    event: str = ""
    info: str = ""
    user_id: int = 0
    location: str = ""
    ip_address: str = ""
    device_name: str = ""
    created_at: str = ""


SecurityLogResponse = DataResponse[SecurityLog]
SecurityLogsListResponse = ListResponse[SecurityLog]


class SecurityLogsListOptions(ListOptions):
    """Filters for security logs; dates are ISO 8601 strings."""
    event: str = ""
    created_after: str = ""
    created_before: str = ""
    ip_address: str = ""
    user_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.event:
            params["event"] = self.event
        if self.created_after:
            params["createdAfter"] = self.created_after
        if self.created_before:
            params["createdBefore"] = self.created_before
        if self.ip_address:
            params["ipAddress"] = self.ip_address
        if self.user_id != 0:
            params["userId"] = str(self.user_id)
        return params
