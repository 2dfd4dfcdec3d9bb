"""Organization invitations: inviting, revoking, resending and listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .graphql import GraphQLRequest

INVITE_USER_OP = "createOrganizationAdminMutation"
INVITE_USER_QUERY = "mutation createOrganizationAdminMutation($input: CreateOrganizationInvitationInput!) {\n  createOrganizationInvitation(input: $input) {\n    success\n    code\n    message\n    invitation {\n      email\n      role\n      __typename\n    }\n    __typename\n  }\n}\n"
INVITE_USER_RESPONSE_TYPE = "createOrganizationInvitation"

REVOKE_INVITATION_OP = "deleteOrganizationInvitationMutation"
REVOKE_INVITATION_QUERY = "mutation deleteOrganizationInvitationMutation($email: ID!) {\n  deleteOrganizationInvitation(email: $email) {\n    success\n    code\n    message\n    __typename\n  }\n}\n"
REVOKE_INVITATION_RESPONSE_TYPE = "deleteOrganizationInvitation"

RESEND_INVITATION_OP = "resendOrganizationInvitationMutation"
RESEND_INVITATION_QUERY = "mutation resendOrganizationInvitationMutation($email: ID!) {\n  resendOrganizationInvitation(email: $email) {\n    success\n    code\n    message\n    __typename\n  }\n}\n"
RESEND_INVITATION_RESPONSE_TYPE = "resendOrganizationInvitation"

LIST_INVITATION_OP = "getInvitationsQuery"
LIST_INVITATION_QUERY = "query getInvitationsQuery {\n  user {\n    id\n    currentOrganization {\n      id\n      invitations {\n        email\n        role\n        date\n        products {\n          name\n          role\n          access\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
LIST_INVITATION_RESPONSE_TYPE = "user"


@dataclass
class Product:
    """A product and the role a user holds in it."""

    name: str = ""
    role: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "role": self.role}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        return cls(name=data.get("name") or "", role=data.get("role") or "")


def products_from(values: Any) -> list[Product]:
    """Build a product list from its API representation."""
    return [Product.from_dict(item) for item in values or ()]


@dataclass
class Invitation:
    """An invitation of a user into the organization."""

    email: str = ""
    role: str = ""
    products: list[Product] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "role": self.role,
                "products": [product.to_dict() for product in self.products]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Invitation:
        return cls(email=data.get("email") or "", role=data.get("role") or "",
                   products=products_from(data.get("products")))


@dataclass
class OrganizationWithInvitations:
    """An organization and its pending invitations."""

    id: str = ""
    invitations: list[Invitation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrganizationWithInvitations:
        return cls(id=data.get("id") or "",
                   invitations=[Invitation.from_dict(i) for i in data.get("invitations") or ()])


@dataclass
class InvitationList:
    """The pending invitations of the current user's organization."""

    owner_user_id: str = ""
    organization: OrganizationWithInvitations = field(default_factory=OrganizationWithInvitations)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InvitationList:
        return cls(owner_user_id=data.get("id") or "",
                   organization=OrganizationWithInvitations.from_dict(
                       data.get("currentOrganization") or {}))


class InvitationService:
    """Manages organization invitations through a GraphQL client."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def _send(self, op: str, query: str, response_type: str, variables: Any = None):
        return self.client.make_graphql_request(
            GraphQLRequest(operation_name=op, query=query, variables=variables,
                           response_type=response_type))

    def create(self, user: Invitation) -> None:
        """Invite *user* into the organization."""
        self._send(INVITE_USER_OP, INVITE_USER_QUERY, INVITE_USER_RESPONSE_TYPE,
                   {"input": user.to_dict()})

    def revoke(self, email: str) -> None:
        """Revoke the pending invitation sent to *email*."""
        self._send(REVOKE_INVITATION_OP, REVOKE_INVITATION_QUERY,
                   REVOKE_INVITATION_RESPONSE_TYPE, {"email": email})

    def resend(self, email: str) -> None:
        """Send the invitation for *email* once more."""
        self._send(RESEND_INVITATION_OP, RESEND_INVITATION_QUERY,
                   RESEND_INVITATION_RESPONSE_TYPE, {"email": email})

    def list(self) -> InvitationList:
        """Return all pending invitations."""
        response = self._send(LIST_INVITATION_OP, LIST_INVITATION_QUERY,
                              LIST_INVITATION_RESPONSE_TYPE)
        return InvitationList.from_dict(response)