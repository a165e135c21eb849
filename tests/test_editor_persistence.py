"""
Tests for saving, loading and deleting maps from the editor.

The editor talks to the real application through httpx's ASGI transport.
"""

import httpx
import pytest

from evplanner.editor import MapEditor, PlacementState, SaveRejected, UnsavedChangesError, Viewport
from evplanner.schemas.map import MapLayer
from evplanner.services.maps_client import MapsApiError, MapsClient


@pytest.fixture
def editor(maps_client):
    return MapEditor(client=maps_client, viewport=Viewport(center=(40.0, -100.0)))


def build_scene(editor):
    first = editor.place_at_center("solar")
    editor.move_icon(first.id, 40.01, -100.01)
    second = editor.place_at_center("battery")
    editor.start_cable_mode()
    editor.click_icon(first.id)
    editor.click_icon(second.id)
    return first, second


def failing_client():
    def handler(request):
        return httpx.Response(500, json={"error": "Something went wrong!"})
    return MapsClient(base_url="http://testserver/api", transport=httpx.MockTransport(handler))


async def test_save_list_and_load_round_trip(editor, maps_client):
    build_scene(editor)
    editor.name = "Depot"
    editor.set_layer("hybrid")

    saved = await editor.save()
    assert saved is not None
    assert editor.map_id == saved.id
    assert not editor.dirty
    assert [m.name for m in editor.saved_maps] == ["Depot"]
    assert editor.saved_maps[0].icon_count == 2
    assert editor.saved_maps[0].connection_count == 1

    other = MapEditor(client=maps_client)
    loaded = await other.load(saved.id)
    assert loaded.id == saved.id
    assert other.name == "Depot"
    assert other.layer == MapLayer.HYBRID
    assert other.center == (40.0, -100.0)
    assert other.payload()["icons"] == editor.payload()["icons"]
    assert other.payload()["connections"] == editor.payload()["connections"]
    assert other.state == PlacementState.IDLE
    assert not other.dirty


async def test_save_requires_name(editor):
    build_scene(editor)
    editor.name = "   "
    with pytest.raises(SaveRejected):
        await editor.save()


async def test_save_requires_icons(editor, maps_client):
    editor.name = "Empty"
    with pytest.raises(SaveRejected):
        await editor.save()
    assert await maps_client.list_maps() == []


async def test_save_failure_sets_error():
    editor = MapEditor(client=failing_client())
    editor.place_at_center("solar")
    editor.name = "Depot"

    assert await editor.save() is None
    assert editor.last_error == "Error saving map. Please try again."
    assert editor.dirty


async def test_load_with_unsaved_changes(editor, maps_client):
    build_scene(editor)
    editor.name = "Depot"
    saved = await editor.save()

    editor.place_at_center("boiler")
    with pytest.raises(UnsavedChangesError):
        await editor.load(saved.id)
    assert len(editor.icons) == 3

    await editor.load(saved.id, confirm_discard=True)
    assert len(editor.icons) == 2
    assert not editor.dirty


async def test_load_missing_map(editor):
    assert await editor.load(999) is None
    assert editor.last_error == "Error loading map. Please try again."


async def test_delete_requires_confirmation(editor, maps_client):
    build_scene(editor)
    editor.name = "Depot"
    saved = await editor.save()

    assert await editor.delete(saved.id) is False
    assert len(await maps_client.list_maps()) == 1

    assert await editor.delete(saved.id, confirmed=True) is True
    assert editor.map_id is None
    assert editor.saved_maps == []
    assert await maps_client.list_maps() == []


async def test_maps_client_reports_api_errors(maps_client):
    with pytest.raises(MapsApiError) as exc_info:
        await maps_client.get_map(404)
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Map not found"


@pytest.mark.parametrize("body", [["bad", "request"], "plain string", 42])
async def test_maps_client_non_object_error_body(body):
    def handler(request):
        return httpx.Response(502, json=body)

    client = MapsClient(base_url="http://testserver/api", transport=httpx.MockTransport(handler))
    with pytest.raises(MapsApiError) as exc_info:
        await client.list_maps()
    assert exc_info.value.status_code == 502


async def test_editor_reports_non_object_error_body():
    def handler(request):
        return httpx.Response(500, json=["oops"])

    editor = MapEditor(client=MapsClient(base_url="http://testserver/api", transport=httpx.MockTransport(handler)))
    assert await editor.load(1) is None
    assert editor.last_error == "Error loading map. Please try again."


async def test_recentering_counts_as_unsaved(editor):
    build_scene(editor)
    editor.name = "Depot"
    saved = await editor.save()
    assert not editor.dirty

    editor.set_center(41.0, -101.0)
    assert editor.dirty
    with pytest.raises(UnsavedChangesError):
        await editor.load(saved.id)

    await editor.load(saved.id, confirm_discard=True)
    assert not editor.dirty
    assert editor.center == (40.0, -100.0)
