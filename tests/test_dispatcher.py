import asyncio
import json

import httpx

from celestial_mcp.core.dispatcher import create_dispatcher
from celestial_mcp.models.common import ToolFailure, ToolSuccess

from conftest import json_response


def test_list_matches_registry_order(make_dispatcher, registry):
    dispatcher, transport = make_dispatcher(json_response({}))

    listed = dispatcher.list_tools()

    assert [d["name"] for d in listed] == list(registry.tools)
    assert all("build_path" not in d and "path" not in d for d in listed)
    assert transport.requests == []


def test_unknown_tool_makes_no_request(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response({}))

    result = asyncio.run(dispatcher.call("does_not_exist", {}))

    assert isinstance(result, ToolFailure)
    assert result.is_error
    assert result.message == "Unknown tool: does_not_exist"
    assert transport.requests == []


def test_success_payload_round_trips(make_dispatcher):
    body = {"lat": 1.2, "lon": 3.4}
    dispatcher, transport = make_dispatcher(json_response(body))

    result = asyncio.run(dispatcher.call("get_iss_position", {}))

    assert isinstance(result, ToolSuccess)
    assert not result.is_error
    assert result.payload == body
    assert json.loads(result.to_text()) == body
    assert transport.requests[0].url.path == "/api/v1/iss/position"


def test_success_text_is_indented_json(make_dispatcher):
    dispatcher, _ = make_dispatcher(json_response({"name": "Tiangong"}))

    result = asyncio.run(dispatcher.call("get_tiangong_position"))

    assert result.to_text() == '{\n  "name": "Tiangong"\n}'


def test_none_arguments_are_treated_as_empty(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response([]))

    result = asyncio.run(dispatcher.call("get_crew_in_space", None))

    assert isinstance(result, ToolSuccess)
    assert len(transport.requests) == 1


def test_search_stars_sends_escaped_query(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response([{"name": "Alpha Centauri A"}]))

    asyncio.run(dispatcher.call("search_stars", {"query": "Alpha Centauri"}))

    url = transport.requests[0].url
    assert url.path == "/api/v1/stars/search"
    assert url.params["q"] == "Alpha Centauri"


def test_star_details_path(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response({"source_id": "12345"}))

    asyncio.run(dispatcher.call("get_star_details", {"id": "12345"}))

    assert transport.requests[0].url.path == "/api/v1/stars/12345"


def test_missing_required_argument_makes_no_request(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response([]))

    result = asyncio.run(dispatcher.call("search_stars", {}))

    assert result.is_error
    assert "search_stars" in result.message
    assert "query" in result.message
    assert transport.requests == []


def test_empty_query_makes_no_request(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response([]))

    result = asyncio.run(dispatcher.call("search_encyclopedia", {"query": ""}))

    assert result.is_error
    assert transport.requests == []


def test_401_points_to_registration(make_dispatcher):
    dispatcher, _ = make_dispatcher(json_response({}, status_code=401))

    result = asyncio.run(dispatcher.call("get_space_news", {}))

    assert result.is_error
    assert "API key" in result.message
    assert "https://celestialnode.com/register" in result.message


def test_429_mentions_rate_limit(make_dispatcher):
    dispatcher, _ = make_dispatcher(json_response({}, status_code=429))

    result = asyncio.run(dispatcher.call("get_mars_weather", {}))

    assert result.is_error
    assert "Rate limit" in result.message


def test_500_message_carries_status(make_dispatcher):
    dispatcher, _ = make_dispatcher(json_response({}, status_code=500))

    result = asyncio.run(dispatcher.call("get_mars_rovers", {}))

    assert result.is_error
    assert result.message == "API error: 500 Internal Server Error"


def test_network_failure_becomes_failure_result(make_dispatcher):
    def unreachable(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    dispatcher, _ = make_dispatcher(unreachable)

    result = asyncio.run(dispatcher.call("get_upcoming_launches", {}))

    assert result.is_error
    assert result.message == "Name or service not known"


def test_malformed_json_becomes_failure_result(make_dispatcher):
    dispatcher, _ = make_dispatcher(lambda request: httpx.Response(200, text="<html>oops</html>"))

    result = asyncio.run(dispatcher.call("get_space_agencies", {}))

    assert isinstance(result, ToolFailure)
    assert result.message


def test_calls_without_key_still_reach_the_api(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response({"count": 0}), api_key=None)

    result = asyncio.run(dispatcher.call("get_hazardous_asteroids", {}))

    assert not result.is_error
    assert "Authorization" not in transport.requests[0].headers


def test_calls_with_key_send_bearer(make_dispatcher):
    dispatcher, transport = make_dispatcher(json_response({"count": 0}), api_key="k-123")

    asyncio.run(dispatcher.call("get_near_earth_objects", {}))

    assert transport.requests[0].headers["Authorization"] == "Bearer k-123"


def test_concurrent_calls_do_not_interfere(make_dispatcher):
    def by_path(request):
        if request.url.path.endswith("/iss/position"):
            return httpx.Response(200, json={"station": "ISS"})
        return httpx.Response(200, json={"station": "Tiangong"})

    dispatcher, _ = make_dispatcher(by_path)

    async def run_both():
        return await asyncio.gather(
            dispatcher.call("get_iss_position", {}),
            dispatcher.call("get_tiangong_position", {}),
            dispatcher.call("get_iss_position", {}),
        )

    iss, tiangong, iss_again = asyncio.run(run_both())

    assert iss.payload == {"station": "ISS"}
    assert tiangong.payload == {"station": "Tiangong"}
    assert iss_again.payload == {"station": "ISS"}


def test_create_dispatcher_discovers_the_catalog(make_settings):
    dispatcher = create_dispatcher(make_settings())

    names = [d["name"] for d in dispatcher.list_tools()]
    assert len(names) == 18
    assert names[0] == "get_iss_position"
