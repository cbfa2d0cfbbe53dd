"""Auth short-circuit isolation under concurrent load.

While valid requests flow through the full pipeline, requests without the
token are short-circuited with 401. Under concurrency an unauthenticated
caller must never create a record or see user data.
"""

import asyncio

import httpx

from users_service.core.store import UserStore

AUTH_HEADERS = {"Authorization": "Bearer demo-token"}
CONCURRENT_REQUESTS = 50


class TestAuthShortCircuitIsolation:
    async def test_mixed_auth_and_unauth_creates(
        self, async_client: httpx.AsyncClient, store: UserStore
    ) -> None:
        """Fire authenticated and unauthenticated creates simultaneously."""
        authenticated = [i % 2 == 0 for i in range(CONCURRENT_REQUESTS)]

        responses = await asyncio.gather(
            *(
                async_client.post(
                    "/users",
                    json={"name": f"user-{i}", "email": f"user-{i}@x.com"},
                    headers=AUTH_HEADERS if is_auth else {},
                )
                for i, is_auth in enumerate(authenticated)
            )
        )

        created_names: set[str] = set()
        for i, (is_auth, response) in enumerate(zip(authenticated, responses, strict=True)):
            if is_auth:
                assert response.status_code == 201
                assert response.json()["name"] == f"user-{i}"
                created_names.add(f"user-{i}")
            else:
                assert response.status_code == 401, (
                    f"Unauthenticated request got {response.status_code}, possible auth leak"
                )
                assert response.json() == {"error": "Unauthorized"}

        stored = {u.name for u in store.list_users()} - {"Alice", "Bob"}
        assert stored == created_names
