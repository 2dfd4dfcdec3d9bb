import json

import pytest

from pingdomkit.active_user import (
    GET_ACTIVE_USER_OP,
    GET_ACTIVE_USER_QUERY,
    LIST_ACTIVE_USER_OP,
    LIST_ACTIVE_USER_QUERY,
    UPDATE_ACTIVE_USER_OP,
    UPDATE_ACTIVE_USER_QUERY,
    ActiveUser,
    ActiveUserService,
    OrganizationMember,
    UpdateActiveUserRequest,
)
from pingdomkit.graphql import GraphQLRequestError, parse_graphql_response
from pingdomkit.invitation import Product

LIST_RESPONSE = """
{"data": {"user": {"id": "1000000000000000001", "currentOrganization": {
  "id": "1000000000000000002",
  "members": [
    {"user": {"id": "1000000000000000003", "firstName": "IT", "lastName": "Ops",
              "email": "it@example.com", "lastLogin": "2021-03-23T07:17:48Z", "__typename": "User"},
     "role": "ADMIN",
     "products": [
       {"name": "APPOPTICS", "access": false, "role": "NO_ACCESS", "__typename": "ProductAccess"},
       {"name": "LOGGLY", "access": false, "role": "NO_ACCESS", "__typename": "ProductAccess"},
       {"name": "PINGDOM", "access": true, "role": "ADMIN", "__typename": "ProductAccess"}],
     "__typename": "OrganizationMember"},
    {"user": {"id": "1000000000000000004", "firstName": "Tooling", "lastName": "Team",
              "email": "tooling@example.com", "lastLogin": "2021-03-24T23:04:56Z", "__typename": "User"},
     "role": "ADMIN",
     "products": [
       {"name": "APPOPTICS", "access": false, "role": "NO_ACCESS", "__typename": "ProductAccess"},
       {"name": "LOGGLY", "access": false, "role": "NO_ACCESS", "__typename": "ProductAccess"},
       {"name": "PINGDOM", "access": false, "role": "NO_ACCESS", "__typename": "ProductAccess"}],
     "__typename": "OrganizationMember"}
  ], "__typename": "Organization"}, "__typename": "AuthenticatedUser"}}}
"""
GET_RESPONSE = """
{"data": {"user": {"id": "1000000000000000001", "currentOrganization": {
  "id": "1000000000000000002",
  "members": [
    {"id": "1000000000000000001",
     "user": {"email": "owner@example.com", "__typename": "User"},
     "role": "ADMIN",
     "products": [
       {"name": "APPOPTICS", "role": "MEMBER", "access": true, "__typename": "ProductAccess"},
       {"name": "LOGGLY", "role": "NO_ACCESS", "access": false, "__typename": "ProductAccess"},
       {"name": "PINGDOM", "role": "ADMIN", "access": true, "__typename": "ProductAccess"}],
     "__typename": "OrganizationMember"}
  ], "__typename": "Organization"}, "__typename": "AuthenticatedUser"}}}
"""
UPDATE_RESPONSE = """
{"data": {"updateMemberRoles": {"code": "200", "success": true, "message": "",
 "__typename": "UpdateMemberRolesResponse"}}}
"""


class FakeTransport:
    def __init__(self, responses):
        self.responses = responses
        self.payloads = []

    def make_graphql_request(self, request):
        self.payloads.append(json.loads(json.dumps(request.to_payload())))
        response = parse_graphql_response(
            self.responses[request.operation_name], request.response_type
        )
        if not response.is_success():
            raise GraphQLRequestError(response.message())
        return response


def test_list_active_users():
    transport = FakeTransport({LIST_ACTIVE_USER_OP: LIST_RESPONSE})
    service = ActiveUserService(transport)
    user_list = service.list()
    assert transport.payloads[0]["operationName"] == LIST_ACTIVE_USER_OP
    assert transport.payloads[0]["query"] == LIST_ACTIVE_USER_QUERY
    members = user_list.organization.members
    assert user_list.owner_user_id == "1000000000000000001"
    assert len(members) == 2

    user = service.get_by_email(members[1].user.email)
    assert user == members[1]


def test_list_parses_member_fields():
    user_list = ActiveUserService(FakeTransport({LIST_ACTIVE_USER_OP: LIST_RESPONSE})).list()
    first = user_list.organization.members[0]
    assert first.user == ActiveUser(
        "1000000000000000003", "IT", "Ops", "it@example.com", "2021-03-23T07:17:48Z"
    )
    assert first.role == "ADMIN"
    assert first.products[2] == Product("PINGDOM", "ADMIN")


def test_get_by_email_missing_returns_none():
    service = ActiveUserService(FakeTransport({LIST_ACTIVE_USER_OP: LIST_RESPONSE}))
    assert service.get_by_email("nobody@example.com") is None


def test_get_active_user():
    user_id = "1000000000000000001"
    transport = FakeTransport({GET_ACTIVE_USER_OP: GET_RESPONSE})
    user_list = ActiveUserService(transport).get(user_id)
    payload = transport.payloads[0]
    assert payload["operationName"] == GET_ACTIVE_USER_OP
    assert payload["query"] == GET_ACTIVE_USER_QUERY
    assert payload["variables"] == {"userId": user_id}
    members = user_list.organization.members
    assert len(members) == 1
    assert members[0].user.email == "owner@example.com"


def test_update_active_user():
    update = UpdateActiveUserRequest(
        user_id="1000000000000000001",
        role="ADMIN",
        products=[Product("APPOPTICS", "MEMBER")],
    )
    transport = FakeTransport({UPDATE_ACTIVE_USER_OP: UPDATE_RESPONSE})
    ActiveUserService(transport).update(update)
    payload = transport.payloads[0]
    assert payload["operationName"] == UPDATE_ACTIVE_USER_OP
    assert payload["query"] == UPDATE_ACTIVE_USER_QUERY
    assert payload["variables"] == {
        "userId": "1000000000000000001",
        "role": "ADMIN",
        "products": [{"name": "APPOPTICS", "role": "MEMBER"}],
    }


def test_update_request_leaves_out_email():
    update = UpdateActiveUserRequest(user_id="1", role="MEMBER", email="a@example.com")
    assert "email" not in update.to_dict()
    assert update.to_dict()["userId"] == "1"


def test_failed_update_raises():
    failing = """{"data": {"updateMemberRoles": {"success": false, "message": "denied"}}}"""
    service = ActiveUserService(FakeTransport({UPDATE_ACTIVE_USER_OP: failing}))
    with pytest.raises(GraphQLRequestError, match="denied"):
        service.update(UpdateActiveUserRequest(user_id="1", role="ADMIN"))


def test_member_from_empty_dict():
    member = OrganizationMember.from_dict({})
    assert member.user == ActiveUser()
    assert member.products == []