"""Account domain service."""

from datetime import datetime

import logfire
from pwdlib import PasswordHash
from sqlalchemy.exc import IntegrityError

from forum.config import LifecycleSettings
from forum.domain.error import (
    BusinessRuleViolationError,
    ErrorCode,
    InvalidRefreshTokenError,
    LoginRejectedError,
    NotFoundError,
)
from forum.domain.model.account import Account, NewAccount
from forum.domain.repository import AccountRepository
from forum.domain.value import AccountId, Email, LoginDecision, Nickname

from .base import Service
from .lifecycle_policy import DeletionSchedule, LifecyclePolicy


class AccountService(Service):
    """Domain service for account registration, login and lifecycle."""

    def __init__(
        self,
        account_repository: AccountRepository,
        lifecycle_policy: LifecyclePolicy,
        password_hash: PasswordHash,
        lifecycle_settings: LifecycleSettings,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            lifecycle_policy: Lifecycle decisions
            password_hash: Password hasher
            lifecycle_settings: Grace window configuration
        """
        self.account_repository = account_repository
        self.lifecycle_policy = lifecycle_policy
        self.password_hash = password_hash
        self.lifecycle_settings = lifecycle_settings

    async def register(
        self, email: str, password: str, name: str, nickname: str
    ) -> Account:
        """Register a new active account.

        Args:
            email: Login email (stored as given)
            password: Plain text password, hashed before storage
            name: Display name
            nickname: Unique public nickname

        Returns:
            Created account

        Raises:
            BusinessRuleViolationError: If the email or nickname is taken
        """
        with logfire.span("account_service.register", nickname=nickname):
            if await self.account_repository.find_by_email(email):
                logfire.warn("Registration with duplicate email", email=email)
                raise BusinessRuleViolationError(ErrorCode.EMAIL_DUPLICATE)
            if await self.account_repository.find_by_nickname(nickname):
                logfire.warn("Registration with duplicate nickname", nickname=nickname)
                raise BusinessRuleViolationError(ErrorCode.NICKNAME_DUPLICATE)

            account = await self.account_repository.create(
                NewAccount(
                    email=Email(email),
                    password_hash=self.password_hash.hash(password),
                    name=name,
                    nickname=Nickname(nickname),
                    created_at=datetime.now(),
                )
            )
            logfire.info("Account registered", account_id=account.id, nickname=nickname)
            return account

    async def verify_credentials(self, email: str, password: str) -> Account:
        """Look up an account by email and check its password.

        Raises:
            NotFoundError: If no account uses the email
            BusinessRuleViolationError: If the password does not match
        """
        account = await self.account_repository.find_by_email(email)
        if account is None:
            logfire.warn("Login for unknown email", email=email)
            raise NotFoundError(ErrorCode.ACCOUNT_NOT_FOUND, "account", email)
        if not self.password_hash.verify(password, account.password_hash):
            logfire.warn("Password mismatch", account_id=account.id)
            raise BusinessRuleViolationError(ErrorCode.INVALID_PASSWORD)
        return account

    def _ensure_allowed(self, account: Account) -> None:
        """Apply the login decision to an account.

        Raises:
            LoginRejectedError: If the account is pending deletion, anonymized
                or disabled
        """
        match self.lifecycle_policy.decide_login(account):
            case LoginDecision.ALLOW:
                return
            case LoginDecision.REJECT_DELETED_PENDING:
                logfire.info("Account rejected, deletion pending", account_id=account.id)
                raise LoginRejectedError(ErrorCode.ACCOUNT_PENDING_DELETE)
            case LoginDecision.REJECT_DISABLED:
                logfire.info("Account rejected, account disabled", account_id=account.id)
                raise LoginRejectedError(ErrorCode.ACCOUNT_DISABLED)

    async def authenticate(self, email: str, password: str) -> Account:
        """Authenticate an account for login.

        Args:
            email: Login email
            password: Plain text password

        Returns:
            The authenticated account

        Raises:
            NotFoundError: If no account uses the email
            BusinessRuleViolationError: If the password does not match
            LoginRejectedError: If the account is pending deletion or disabled
        """
        with logfire.span("account_service.authenticate", email=email):
            account = await self.verify_credentials(email, password)
            self._ensure_allowed(account)
            logfire.info("Login allowed", account_id=account.id)
            return account

    async def require_active(self, account_id: AccountId) -> Account:
        """Load the account behind an issued token and check it may still act.

        Tokens outlive deletion requests, so every write made with a token
        goes through the same decision as login.

        Raises:
            NotFoundError: If account not found
            LoginRejectedError: If the account is pending deletion, anonymized
                or disabled
        """
        with logfire.span("account_service.require_active", account_id=account_id):
            account = await self.get_account(account_id)
            self._ensure_allowed(account)
            return account

    async def update_profile(
        self,
        account_id: AccountId,
        name: str | None,
        nickname: str | None,
        image: str | None,
    ) -> Account:
        """Change name, nickname and avatar of an active account.

        Missing or blank name and nickname keep the current values; a missing
        image keeps the current avatar.

        Raises:
            NotFoundError: If account not found
            LoginRejectedError: If the account may not act
            BusinessRuleViolationError: If the nickname belongs to another
                account (USER002) or the row could not be updated (U502)
        """
        with logfire.span("account_service.update_profile", account_id=account_id):
            account = await self.require_active(account_id)

            new_name = name.strip() if name and name.strip() else account.name
            new_nickname = (
                nickname.strip() if nickname and nickname.strip() else account.nickname.root
            )
            new_image = image if image is not None else account.image

            if new_nickname != account.nickname.root:
                owner = await self.account_repository.find_by_nickname(new_nickname)
                if owner is not None and owner.id != account_id:
                    logfire.warn("Profile update with taken nickname", account_id=account_id)
                    raise BusinessRuleViolationError(ErrorCode.NICKNAME_DUPLICATE)

            now = datetime.now()
            try:
                updated = await self.account_repository.update_profile(
                    account_id, new_name, new_nickname, new_image, now
                )
            except IntegrityError:
                # Nickname claimed by a concurrent request
                logfire.warn("Nickname taken concurrently", account_id=account_id)
                raise BusinessRuleViolationError(ErrorCode.NICKNAME_DUPLICATE)
            if not updated:
                logfire.error("Profile update changed no row", account_id=account_id)
                raise BusinessRuleViolationError(ErrorCode.UPDATE_FAIL)

            logfire.info("Profile updated", account_id=account_id)
            return account.model_copy(
                update={
                    "name": new_name,
                    "nickname": Nickname(new_nickname),
                    "image": new_image,
                    "updated_at": now,
                }
            )

    async def store_refresh_token(self, account_id: AccountId, token: str) -> None:
        """Remember the refresh token issued at login, replacing any older one.

        Raises:
            BusinessRuleViolationError: If the account could not be updated
        """
        if not await self.account_repository.store_refresh_token(account_id, token):
            raise BusinessRuleViolationError(ErrorCode.UPDATE_FAIL)

    async def rotate_refresh_token(
        self, account_id: AccountId, current: str, replacement: str
    ) -> Account:
        """Exchange a refresh token for a new one.

        Raises:
            NotFoundError: If account not found
            LoginRejectedError: If the account may not act
            InvalidRefreshTokenError: If ``current`` is not the stored token
        """
        with logfire.span("account_service.rotate_refresh_token", account_id=account_id):
            account = await self.require_active(account_id)
            if not await self.account_repository.rotate_refresh_token(
                account_id, current, replacement
            ):
                logfire.warn("Stale or revoked refresh token", account_id=account_id)
                raise InvalidRefreshTokenError()
            logfire.info("Refresh token rotated", account_id=account_id)
            return account

    async def revoke_refresh_token(self, account_id: AccountId) -> None:
        """Forget the stored refresh token (logout)."""
        await self.account_repository.store_refresh_token(account_id, None)
        logfire.info("Refresh token revoked", account_id=account_id)

    async def get_account(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_account", account_id=account_id):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=account_id)
                raise NotFoundError(ErrorCode.ACCOUNT_NOT_FOUND, "account", account_id)
            return account

    async def request_deletion(
        self, account_id: AccountId, now: datetime
    ) -> DeletionSchedule:
        """Schedule the account for deletion after the grace window.

        Args:
            account_id: Account ID
            now: Current time

        Returns:
            The persisted schedule

        Raises:
            NotFoundError: If account not found
            AlreadyScheduledError: If an unexpired schedule exists
            AccountAnonymizedError: If the account is already anonymized
        """
        with logfire.span("account_service.request_deletion", account_id=account_id):
            account = await self.get_account(account_id)
            schedule = self.lifecycle_policy.schedule_deletion(
                account, now, self.lifecycle_settings.grace_days
            )

            updated = await self.account_repository.schedule_deletion(
                account_id, schedule.deleted_at
            )
            if not updated:
                raise NotFoundError(ErrorCode.ACCOUNT_NOT_FOUND, "account", account_id)

            logfire.info(
                "Account deletion scheduled",
                account_id=account_id,
                deleted_at=schedule.deleted_at.isoformat(),
            )
            return schedule

    async def restore(self, account_id: AccountId) -> Account:
        """Cancel a scheduled deletion.

        Returns:
            The restored account

        Raises:
            NotFoundError: If account not found
            NotScheduledError: If nothing is scheduled
            AccountAnonymizedError: If the account is already anonymized
        """
        with logfire.span("account_service.restore", account_id=account_id):
            account = await self.get_account(account_id)
            self.lifecycle_policy.restore(account)

            updated = await self.account_repository.clear_deletion(account_id)
            if not updated:
                # Anonymized by the sweep in the meantime
                raise BusinessRuleViolationError(ErrorCode.ACCOUNT_ANONYMIZED)

            logfire.info("Account restored", account_id=account_id)
            return account.model_copy(update={"deleted_at": None})

    async def restore_with_credentials(self, email: str, password: str) -> Account:
        """Restore an account identified by its login credentials.

        Accounts pending deletion cannot log in, so restoration authenticates
        with email and password instead of a session token.
        """
        with logfire.span("account_service.restore_with_credentials", email=email):
            account = await self.verify_credentials(email, password)
            return await self.restore(account.id)
