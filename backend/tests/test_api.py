def _new_session(client):
    response = client.post("/dashboard/sessions")
    assert response.status_code == 201
    return response.json()


def _send(client, session_id, event):
    return client.post(f"/dashboard/{session_id}/events", json={"event": event})


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_facilities(client):
    data = client.get("/facilities").json()
    assert [f["id"] for f in data] == [1, 2, 3]
    assert data[0]["prices"]["standard"]["label"] == "₹60/hour"


def test_unknown_facility_is_404(client):
    assert client.get("/facilities/99").status_code == 404
    assert client.get("/facilities/99/detail").status_code == 404


def test_facility_projections(client):
    availability = client.get("/facilities/2/availability").json()
    assert availability["level"] == "medium"

    detail = client.get("/facilities/2/detail").json()
    assert detail["premium"] is None
    assert [row["tier"] for row in detail["pricing"]] == ["standard", "bike_parking"]

    summary = client.get("/facilities/1/summary").json()
    assert summary["premium_badge"] is True


def test_new_session_is_unselected(client):
    snapshot = _new_session(client)
    assert snapshot["state"]["selected_id"] is None
    assert snapshot["map_view"]["popup"] is None
    assert snapshot["map_view"]["viewport"]["zoom"] == 12
    assert client.get("/dashboard/sessions/count").json() == {"active_sessions": 1}


def test_select_from_list_over_http(client):
    session_id = _new_session(client)["session_id"]
    response = _send(client, session_id, {"type": "select_from_list", "facility_id": 2})
    assert response.status_code == 200

    snapshot = response.json()
    assert snapshot["state"]["selected_id"] == 2
    assert snapshot["map_view"]["viewport"] == {
        "center": {"lat": 12.9758, "lng": 77.6065},
        "zoom": 15,
    }
    assert snapshot["map_view"]["popup"]["facility_id"] == 2
    assert [item["selected"] for item in snapshot["list_view"]["items"]] == [False, True, False]


def test_pan_then_marker_click_over_http(client):
    session_id = _new_session(client)["session_id"]
    _send(client, session_id, {"type": "select_from_list", "facility_id": 2})
    viewport = {"center": {"lat": 12.99, "lng": 77.62}, "zoom": 13}
    _send(client, session_id, {"type": "viewport_changed", "viewport": viewport})
    snapshot = _send(
        client, session_id,
        {"type": "select_from_map", "facility_id": 1, "interaction_id": "c1"},
    ).json()

    assert snapshot["state"]["selected_id"] == 1
    assert snapshot["map_view"]["viewport"] == viewport

    snapshot = _send(
        client, session_id,
        {"type": "clear_selection", "source": "map_click", "interaction_id": "c1"},
    ).json()
    assert snapshot["state"]["selected_id"] == 1

    snapshot = _send(client, session_id, {"type": "clear_selection"}).json()
    assert snapshot["state"]["selected_id"] is None


def test_unknown_facility_event_keeps_state(client):
    session_id = _new_session(client)["session_id"]
    _send(client, session_id, {"type": "select_from_map", "facility_id": 3})

    response = _send(client, session_id, {"type": "select_from_list", "facility_id": 42})
    assert response.status_code == 404

    snapshot = client.get(f"/dashboard/{session_id}").json()
    assert snapshot["state"]["selected_id"] == 3
    assert snapshot["map_view"]["viewport"]["zoom"] == 12


def test_invalid_event_is_rejected(client):
    session_id = _new_session(client)["session_id"]
    response = _send(client, session_id, {"type": "teleport", "facility_id": 1})
    assert response.status_code == 422


def test_map_endpoint_and_session_lifecycle(client):
    session_id = _new_session(client)["session_id"]
    view = client.get(f"/map/{session_id}").json()
    assert len(view["markers"]) == 3

    assert client.delete(f"/dashboard/{session_id}").status_code == 200
    assert client.get(f"/dashboard/{session_id}").status_code == 404
    assert client.get(f"/map/{session_id}").status_code == 404
    assert client.delete(f"/dashboard/{session_id}").status_code == 404
