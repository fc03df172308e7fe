from fastapi.testclient import TestClient  # type: ignore

from declfmt.main import app

client = TestClient(app)


def test_describe_native(shop_cir):
    resp = client.post("/describe", json={"cir": shop_cir})
    assert resp.status_code == 200

    decls = {d["type"]: d["lines"] for d in resp.json()["declarations"]}
    assert decls["Order"][0] == "public class Order extends Base implements Priced {"
    assert "    public void add(Item, int) {}" in decls["Order"]
    assert decls["Order"][-1] == "}"


def test_describe_generated(shop_cir):
    resp = client.post("/describe", json={"cir": shop_cir, "generated": True})
    assert resp.status_code == 200

    decls = {d["type"]: d["lines"] for d in resp.json()["declarations"]}
    assert "    public void add(Item item, int qty) {}" in decls["Order"]


def test_describe_requires_nodes():
    resp = client.post("/describe", json={"cir": {"edges": []}})
    assert resp.status_code == 422


def test_describe_malformed_cir():
    resp = client.post("/describe", json={"cir": {"nodes": [{"kind": "TypeDecl"}]}})
    assert resp.status_code == 400


def test_describe_value():
    resp = client.post("/describe/value", json={"name": "f", "args": [1, None, "x"]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["signature"] == "f(int, Object, str)"
    assert data["types"] == ["int", "null", "str"]


def test_prefix():
    resp = client.post("/prefix", json={"one": "hello", "two": "help"})
    assert resp.json() == {"prefix": "hel"}


def test_describe_value_reports_logical_types():
    resp = client.post("/describe/value", json={"name": "g", "args": [True, 2.5, 3]})
    data = resp.json()
    assert data["signature"] == "g(boolean, double, int)"
    assert data["types"] == ["boolean", "double", "int"]


def test_describe_rejects_bad_node_shapes():
    bad_cirs = [
        {"nodes": [{"id": "type:A", "kind": "TypeDecl", "attrs": None}, "type:B"]},
        {"nodes": [{"id": "type:A", "kind": "TypeDecl", "attrs": {"name": "A", "modifiers": 5}}]},
        {"nodes": [{"id": "type:A", "kind": "TypeDecl", "attrs": {"name": None, "kind": 3}}]},
        {"nodes": ["type:A"]},
        {"nodes": [{"id": "type:A", "kind": "TypeDecl", "attrs": "A"}]},
        {"nodes": [], "edges": ["type:A->type:B"]},
    ]
    for cir in bad_cirs:
        resp = client.post("/describe", json={"cir": cir})
        assert resp.status_code == 400, cir


def test_describe_tolerates_null_attrs_and_names():
    cir = {
        "nodes": [
            {"id": "type:A", "kind": "TypeDecl", "attrs": None},
            {"id": "type:B", "kind": "TypeDecl", "attrs": {"name": None, "modifiers": ["public"]}},
        ]
    }
    resp = client.post("/describe", json={"cir": cir})
    assert resp.status_code == 200
    lines = [d["lines"][0] for d in resp.json()["declarations"]]
    assert lines == ["class UnknownType extends Object {", "public class UnknownType extends Object {"]
