# pingdomkit

Data models for Pingdom transaction (TMS) checks and integrations, and
GraphQL-based services for managing the users of a SolarWinds organization.
The package uses only the standard library.

## Installation

```
pip install pingdomkit
```

Tests need the `test` extra:

```
pip install "pingdomkit[test]"
pytest
```

## Transaction checks

`pingdomkit.tms_check_types` holds `TMSCheck`, `TMSCheckStep` and
`TMSCheckMetaData`.

- `TMSCheck.valid()` raises `ValueError` when the name is empty, there are no
  steps, the interval is not one of 5, 10, 20, 60, 720 or 1440 (0 means
  unset), the severity level is not `high` or `low` (empty means unset), or a
  tag holds characters other than `A-Z`, `a-z`, `0-9`, `_` and `-`.
- `TMSCheck.render_for_json_api()` returns the compact JSON body for the API.
  Empty optional fields are left out; `active` is always present.
- `TMSCheck.to_dict()` and `TMSCheck.from_dict(data)` convert to and from the
  API's dictionary form; `from_dict` ignores keys it does not know.

```python
from pingdomkit.tms_check_types import TMSCheck, TMSCheckStep

check = TMSCheck(
    name="homepage",
    steps=[TMSCheckStep(fn="go_to", args={"url": "www.example.com"})],
    interval=10,
    severity_level="high",
    tags=["web", "front_page"],
)
check.valid()
print(check.render_for_json_api())
```

## Integrations

`pingdomkit.integration_types` holds `WebHookIntegration` and `WebHookData`
for building requests, and `IntegrationGetResponse`, `IntegrationStatus` and
`IntegrationProvider` for reading responses (each with `from_dict(data)`).

`WebHookIntegration.valid()` raises `ValueError` unless the provider id is 1
or 2 and the user data has a non-empty name and URL.

```python
from pingdomkit.integration_types import WebHookData, WebHookIntegration

hook = WebHookIntegration(
    active=True,
    provider_id=2,
    user_data=WebHookData(name="alerts", url="https://hooks.example.com/alerts"),
)
hook.valid()
params = hook.post_params()
# {"active": "true", "provider_id": "2",
#  "data_json": '{"name":"alerts","url":"https://hooks.example.com/alerts"}'}
```

## GraphQL

`pingdomkit.graphql` provides:

- `GraphQLRequest(operation_name, query, variables=None, response_type="")`;
  `to_payload()` gives the request body (the response type is not sent).
- `parse_graphql_response(body, key)` reads a body (string, bytes or a
  readable object) and returns the object under `data[key]` as a
  `GraphQLResponse`, a `dict` with `is_success()` and `message()`.
- `GraphQLClient(endpoint, headers=None, timeout=30.0)` posts requests with
  `make_graphql_request(request)` and returns the parsed response.

`GraphQLRequestError` is raised when the request cannot be sent, the response
has no `data` object or no object under the requested key, or the response
reports `success: false` (its message becomes the error text).

## Users and invitations

The services take any object with a `make_graphql_request(request)` method
returning a `GraphQLResponse`, such as `GraphQLClient`.

- `InvitationService` (`pingdomkit.invitation`): `create`, `revoke`,
  `resend`, `list`.
- `ActiveUserService` (`pingdomkit.active_user`): `list`, `get`, `update`,
  `get_by_email` (returns `None` when no member has the address).
- `UserService` (`pingdomkit.user`) combines both:
  - `create` sends an invitation;
  - `update` changes the roles of an active user, or else revokes the pending
    invitation and sends a new one, raising `LookupError` if there is neither;
  - `delete` revokes an invitation, raising `ClientError` with
    `ErrorCode.DELETE_ACTIVE_USER_EXCEPTION` for an active user and with
    `ErrorCode.NETWORK_EXCEPTION` when the revocation fails;
  - `retrieve` returns the active or invited user, or `None`.

```python
from pingdomkit.active_user import ActiveUserService
from pingdomkit.graphql import GraphQLClient
from pingdomkit.invitation import Invitation, InvitationService, Product
from pingdomkit.user import UserService

client = GraphQLClient(
    "https://api.example.com/graphql",
    headers={"Authorization": "Bearer token"},
)
users = UserService(ActiveUserService(client), InvitationService(client))
users.create(Invitation(
    email="someone@example.com",
    role="MEMBER",
    products=[Product(name="PINGDOM", role="ADMIN")],
))
print(users.retrieve("someone@example.com"))
```

## Utilities

- `pingdomkit.utils.to_json_no_escape(obj)` returns compact JSON with sorted
  keys that leaves HTML characters unescaped and ends with a newline.
- `pingdomkit.utils.rand_string(n)` returns a random string of ASCII letters
  and digits.
- `pingdomkit.http_utils.retrieve_cookie(set_cookie_headers, name)` returns a
  cookie's value from `Set-Cookie` header values, raising `LookupError` when
  there are no cookies or the named one is missing.
- `pingdomkit.errors` holds `ClientError`, `ErrorCode`,
  `new_network_error(cause)` and `new_error_attempt_delete_active_user(user)`.

## What the package does not do

There is no HTTP client for transaction checks or integrations: the models
validate and serialize them, but sending them to the API is up to the caller.
There is no login flow either; `GraphQLClient` sends whatever headers it is
given, so obtaining session cookies or tokens is left to the caller.