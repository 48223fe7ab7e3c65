import json

import pytest
from figflow.frontend.nodes import DesignNode, DocumentSnapshot, NodeSource, SnapshotError


def test_design_node_from_plugin_shape():
    node = DesignNode.from_dict({
        "id": "1:1",
        "name": "Home",
        "type": "FRAME",
        "width": 390,
        "height": 844,
        "reactions": [{"trigger": {"type": "ON_CLICK"}, "actions": []}],
    })

    assert (node.width, node.height) == (390, 844)
    assert len(node.reactions) == 1
    assert node.children == ()


def test_design_node_from_rest_shape():
    node = DesignNode.from_dict({
        "id": "1:1",
        "name": "Home",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 5, "y": 5, "width": 375, "height": 667},
        "interactions": [{"trigger": {"type": "ON_HOVER"}, "actions": []}],
        "children": [{"id": "1:2", "name": "Title", "type": "TEXT"}],
    })

    assert (node.width, node.height) == (375, 667)
    assert node.reactions[0]["trigger"]["type"] == "ON_HOVER"
    assert node.children[0].name == "Title"


def test_snapshot_selects_first_canvas(shop_snapshot):
    assert shop_snapshot.document_name == "Shop App"
    assert shop_snapshot.page_name == "Checkout"
    assert [n.name for n in shop_snapshot.page_children()] == ["Home", "Cart", "Promo Dialog", "Empty Frame"]


def test_snapshot_page_by_name_or_id(shop_document):
    assert DocumentSnapshot(shop_document, page="Archive").page_name == "Archive"
    assert DocumentSnapshot(shop_document, page="0:2").page_name == "Archive"


def test_snapshot_resolves_nodes_on_any_page(shop_snapshot):
    assert shop_snapshot.resolve_by_id("1:10").name == "Buy Button"
    assert shop_snapshot.resolve_by_id("2:1").name == "Old Home"
    assert shop_snapshot.resolve_by_id("9:99") is None


def test_snapshot_selection(shop_snapshot, shop_document):
    assert [n.id for n in shop_snapshot.current_selection()] == ["1:2"]

    override = DocumentSnapshot(shop_document, selection=["1:1", "missing"])
    assert [n.id for n in override.current_selection()] == ["1:1"]


def test_bare_document_node():
    snapshot = DocumentSnapshot({
        "name": "Bare",
        "children": [{"id": "0:1", "name": "Page 1", "type": "CANVAS", "children": []}],
    })

    assert snapshot.document_name == "Bare"
    assert snapshot.page_name == "Page 1"
    assert snapshot.page_children() == []


def test_unknown_page_raises(shop_document):
    with pytest.raises(SnapshotError):
        DocumentSnapshot(shop_document, page="Nope")


def test_document_without_pages_raises():
    with pytest.raises(SnapshotError):
        DocumentSnapshot({"name": "Empty", "document": {"children": []}})


def test_from_file(tmp_path, shop_document):
    path = tmp_path / "shop.json"
    path.write_text(json.dumps(shop_document), encoding="utf-8")

    snapshot = DocumentSnapshot.from_file(path, page="Archive")

    assert snapshot.page_name == "Archive"


def test_from_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotError):
        DocumentSnapshot.from_file(path)


def test_incomplete_node_source_cannot_be_created():
    class PageOnly(NodeSource):
        def page_children(self):
            return []

    with pytest.raises(TypeError):
        PageOnly()
