"""Users of the organization, whether invited or already active."""

from __future__ import annotations

import logging

from .active_user import ActiveUserService, OrganizationMember, UpdateActiveUserRequest
from .errors import new_error_attempt_delete_active_user, new_network_error
from .invitation import Invitation, InvitationService

logger = logging.getLogger(__name__)

User = Invitation


class UserService:
    """Manages users through active-member and invitation operations."""

    def __init__(
        self,
        active_user_service: ActiveUserService,
        invitation_service: InvitationService,
    ) -> None:
        self.active_user_service = active_user_service
        self.invitation_service = invitation_service

    def _find_active(self, email: str) -> OrganizationMember | None:
        """Look up an active member, treating a failed lookup as not found."""
        try:
            return self.active_user_service.get_by_email(email)
        except Exception as exc:
            logger.debug("active user lookup for %s failed: %s", email, exc)
            return None

    def create(self, user: User) -> None:
        """Invite a new user; users can only be added by invitation."""
        self.invitation_service.create(user)

    def update(self, update: User) -> None:
        """Update an active user, or replace the pending invitation for the address.

        Raises LookupError when there is neither an active user nor an invitation.
        """
        active_user = self._find_active(update.email)
        if active_user is not None:
            self.active_user_service.update(
                UpdateActiveUserRequest(
                    user_id=active_user.user.id,
                    role=update.role,
                    products=update.products,
                )
            )
            return

        logger.info("Will revoke the invitation and send a new one for user: %s", update.email)
        invitations = self.invitation_service.list().organization.invitations
        found = False
        for invitation in invitations:
            if invitation.email == update.email:
                found = True
                self.invitation_service.revoke(update.email)
        if not found:
            raise LookupError(f"there is no invitation with email: {update.email}")
        self.invitation_service.create(
            Invitation(email=update.email, role=update.role, products=update.products)
        )

    def delete(self, email: str) -> None:
        """Revoke the invitation for *email*; active users cannot be deleted."""
        if self._find_active(email) is not None:
            raise new_error_attempt_delete_active_user(email)
        try:
            self.invitation_service.revoke(email)
        except Exception as exc:
            raise new_network_error(exc) from exc

    def retrieve(self, email: str) -> User | None:
        """Return the user with *email*, active or invited, or None."""
        active_user = self.active_user_service.get_by_email(email)
        if active_user is not None:
            return User(email=email, role=active_user.role, products=active_user.products)

        logger.info("user %s is not found in active user list, will look up in invitations", email)
        invitations = self.invitation_service.list().organization.invitations
        return next((inv for inv in invitations if inv.email == email), None)