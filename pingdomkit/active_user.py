"""Active members of the organization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .graphql import GraphQLRequest
from .invitation import Product, products_from

LIST_ACTIVE_USER_OP = "getUsersQuery"
LIST_ACTIVE_USER_QUERY = "query getUsersQuery {\n  user {\n    id\n    currentOrganization {\n      id\n      members {\n        user {\n          id\n          firstName\n          lastName\n          email\n          lastLogin\n          __typename\n        }\n        role\n        products {\n          name\n          access\n          role\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
LIST_ACTIVE_USER_RESPONSE_TYPE = "user"

GET_ACTIVE_USER_OP = "getEditUserQuery"
GET_ACTIVE_USER_QUERY = "query getEditUserQuery($userId: String!) {\n  user {\n    id\n    currentOrganization {\n      id\n      members(filter: {id: $userId}) {\n        id\n        user {\n          email\n          __typename\n        }\n        role\n        products {\n          name\n          role\n          access\n          __typename\n        }\n        __typename\n      }\n      __typename\n    }\n    __typename\n  }\n}\n"
GET_ACTIVE_USER_RESPONSE_TYPE = "user"

UPDATE_ACTIVE_USER_OP = "updateMemberRolesMutation"
UPDATE_ACTIVE_USER_QUERY = "mutation updateMemberRolesMutation($userId: ID!, $role: OrganizationRole!, $products: [ProductAccessInput!]) {\n  updateMemberRoles(userId: $userId, input: {role: $role, products: $products}) {\n    code\n    success\n    message\n    __typename\n  }\n}\n"
UPDATE_ACTIVE_USER_RESPONSE_TYPE = "updateMemberRoles"


@dataclass
class UpdateActiveUserRequest:
    """A change of an active member's roles."""

    user_id: str = ""
    role: str = ""
    products: list[Product] = field(default_factory=list)
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the request variables; the e-mail address is not sent."""
        return {"userId": self.user_id, "role": self.role,
                "products": [product.to_dict() for product in self.products]}


@dataclass
class ActiveUser:
    """The account details of an organization member."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    last_login: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActiveUser:
        return cls(id=data.get("id") or "", first_name=data.get("firstName") or "",
                   last_name=data.get("lastName") or "", email=data.get("email") or "",
                   last_login=data.get("lastLogin") or "")


@dataclass
class OrganizationMember:
    """A member of the organization with its roles."""

    user: ActiveUser = field(default_factory=ActiveUser)
    role: str = ""
    products: list[Product] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrganizationMember:
        return cls(user=ActiveUser.from_dict(data.get("user") or {}),
                   role=data.get("role") or "", products=products_from(data.get("products")))


@dataclass
class OrganizationWithMembers:
    """An organization and its members."""

    id: str = ""
    members: list[OrganizationMember] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrganizationWithMembers:
        return cls(id=data.get("id") or "",
                   members=[OrganizationMember.from_dict(m) for m in data.get("members") or ()])


@dataclass
class ActiveUserList:
    """The members of the current user's organization."""

    owner_user_id: str = ""
    organization: OrganizationWithMembers = field(default_factory=OrganizationWithMembers)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActiveUserList:
        return cls(owner_user_id=data.get("id") or "",
                   organization=OrganizationWithMembers.from_dict(
                       data.get("currentOrganization") or {}))


class ActiveUserService:
    """Reads and updates active organization members through a GraphQL client."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def _send(self, op: str, query: str, response_type: str, variables: Any = None):
        return self.client.make_graphql_request(
            GraphQLRequest(operation_name=op, query=query, variables=variables,
                           response_type=response_type))

    def list(self) -> ActiveUserList:
        """Return every member of the organization."""
        return ActiveUserList.from_dict(self._send(
            LIST_ACTIVE_USER_OP, LIST_ACTIVE_USER_QUERY, LIST_ACTIVE_USER_RESPONSE_TYPE))

    def get(self, user_id: str) -> ActiveUserList:
        """Return the organization filtered down to the member *user_id*."""
        return ActiveUserList.from_dict(self._send(
            GET_ACTIVE_USER_OP, GET_ACTIVE_USER_QUERY, GET_ACTIVE_USER_RESPONSE_TYPE,
            {"userId": user_id}))

    def update(self, update: UpdateActiveUserRequest) -> None:
        """Apply new roles to an active member."""
        self._send(UPDATE_ACTIVE_USER_OP, UPDATE_ACTIVE_USER_QUERY,
                   UPDATE_ACTIVE_USER_RESPONSE_TYPE, update.to_dict())

    def get_by_email(self, email: str) -> OrganizationMember | None:
        """Return the member with *email*, or None if there is none."""
        members = self.list().organization.members
        return next((member for member in members if member.user.email == email), None)