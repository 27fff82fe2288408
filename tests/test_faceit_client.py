import asyncio

import httpx
import pytest

from domain.exceptions import RateLimitExceeded, UpstreamError
from infrastructure.api import FaceitAPIClient
from helpers import error


def _sequence(*responses):
    queue = list(responses)

    def _route(request):
        return queue.pop(0) if len(queue) > 1 else queue[0]

    return _route


def test_get_json_sends_bearer_token(fake_api, with_client):
    fake_api.add("/teams/t1", {"team_id": "t1"})

    data = with_client(lambda api: api.get_team("t1"))

    assert data == {"team_id": "t1"}
    request = fake_api.requests[0]
    assert request.headers["Authorization"] == "Bearer test-key-0123456789"
    assert request.headers["Accept"] == "application/json"


def test_429_is_retried_with_header_delays(fake_api, with_client, recording_sleep):
    fake_api.add("/teams/t1", _sequence(
        httpx.Response(429, headers={"Retry-After": "2"}),
        httpx.Response(429, headers={"ratelimit-reset": "1"}),
        httpx.Response(429),
        httpx.Response(200, json={"team_id": "t1"}),
    ))

    data = with_client(lambda api: api.get_team("t1"))

    assert data == {"team_id": "t1"}
    assert recording_sleep.calls == [2.0, 1.0, 1.5]
    assert len(fake_api.requests) == 4


def test_persistent_429_raises_after_five_retries(fake_api, with_client, recording_sleep):
    fake_api.add("/teams/t1", lambda request: httpx.Response(429, text="slow down"))

    with pytest.raises(RateLimitExceeded) as exc_info:
        with_client(lambda api: api.get_team("t1"))

    assert len(fake_api.requests) == 6
    assert len(recording_sleep.calls) == 5
    assert exc_info.value.status == 429
    assert exc_info.value.body == "slow down"


def test_non_2xx_raises_with_status_url_and_body(fake_api, with_client, recording_sleep):
    fake_api.add("/matches/m1/stats", error(503, "maintenance"))

    with pytest.raises(UpstreamError) as exc_info:
        with_client(lambda api: api.get_match_stats("m1"))

    err = exc_info.value
    assert not isinstance(err, RateLimitExceeded)
    assert err.status == 503
    assert err.url.endswith("/matches/m1/stats")
    assert "maintenance" in str(err)
    assert recording_sleep.calls == []


def test_success_with_undecodable_body_is_upstream_error(fake_api, with_client):
    fake_api.add("/matches/m1/stats", lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(UpstreamError) as exc_info:
        with_client(lambda api: api.get_match_stats("m1"))

    assert exc_info.value.status == 200
    assert exc_info.value.body == "<html>oops</html>"


def test_transport_failure_is_upstream_error(fake_api, with_client):
    def _down(request):
        raise httpx.ConnectError("connection refused", request=request)

    fake_api.add("/teams/t1", _down)

    with pytest.raises(UpstreamError) as exc_info:
        with_client(lambda api: api.get_team("t1"))

    assert exc_info.value.status is None


def test_query_parameters_are_sent(fake_api, with_client):
    fake_api.add("/championships/c1/matches", {"items": []})

    with_client(lambda api: api.list_championship_matches("c1", limit=100, offset=200))

    params = fake_api.requests[0].url.params
    assert params["limit"] == "100"
    assert params["offset"] == "200"


def test_probe_reports_errors_without_raising(fake_api, with_client):
    fake_api.add("/leaderboards/lb1", lambda request: httpx.Response(
        400, text="bad request", headers={"RateLimit-Remaining": "7"}
    ))

    out = with_client(lambda api: api.probe("/leaderboards/lb1", {"limit": 20, "offset": None}))

    assert not out.ok
    assert out.status == 400
    assert out.headers["ratelimit-remaining"] == "7"
    assert out.body == "bad request"
    assert "offset" not in fake_api.requests[0].url.params


def test_client_requires_context_manager():
    api = FaceitAPIClient("test-key-0123456789", base_url="https://api.test/data/v4")
    with pytest.raises(RuntimeError):
        asyncio.run(api.get_json("/teams/t1"))
