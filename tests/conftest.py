import pytest


def make_shop_cir():
    """CIR for: class Order extends Base implements Priced, interface Priced, class Item."""
    nodes = [
        {"id": "type:shop.Item", "kind": "TypeDecl",
         "attrs": {"name": "Item", "kind": "class", "visibility": "package", "package": "shop", "modifiers": []}},
        {"id": "type:shop.Order", "kind": "TypeDecl",
         "attrs": {"name": "Order", "kind": "class", "visibility": "public", "package": "shop",
                   "modifiers": ["public"]}},
        {"id": "type:shop.Priced", "kind": "TypeDecl",
         "attrs": {"name": "Priced", "kind": "interface", "visibility": "public", "package": "shop",
                   "modifiers": ["public"]}},
        {"id": "field:shop.Order:items", "kind": "Field",
         "attrs": {"name": "items", "type_name": "Item", "raw_type": "List<Item>", "visibility": "private",
                   "modifiers": ["private"], "multiplicity": "1..*"}},
        {"id": "method:shop.Order:total", "kind": "Method",
         "attrs": {"name": "total", "return_type": "double", "raw_return_type": "double",
                   "visibility": "public", "modifiers": ["public"], "is_constructor": False}},
        {"id": "method:shop.Order:add", "kind": "Method",
         "attrs": {"name": "add", "return_type": "void", "raw_return_type": "void",
                   "visibility": "public", "modifiers": ["public"], "is_constructor": False}},
        {"id": "param:shop.Order:add:item", "kind": "Parameter",
         "attrs": {"name": "item", "type_name": "Item", "raw_type": "Item"}},
        {"id": "param:shop.Order:add:qty", "kind": "Parameter",
         "attrs": {"name": "qty", "type_name": "int", "raw_type": "int"}},
        {"id": "ctor:shop.Order:Order", "kind": "Method",
         "attrs": {"name": "Order", "return_type": "void", "raw_return_type": "<constructor>",
                   "visibility": "public", "modifiers": ["public"], "is_constructor": True}},
        {"id": "method:shop.Priced:price", "kind": "Method",
         "attrs": {"name": "price", "return_type": "double", "raw_return_type": "double",
                   "visibility": "public", "modifiers": ["public", "abstract"], "is_abstract": True}},
    ]
    edges = [
        {"src": "type:shop.Order", "dst": "field:shop.Order:items", "type": "HAS_FIELD"},
        {"src": "type:shop.Order", "dst": "method:shop.Order:total", "type": "HAS_METHOD"},
        {"src": "type:shop.Order", "dst": "method:shop.Order:add", "type": "HAS_METHOD"},
        {"src": "type:shop.Order", "dst": "ctor:shop.Order:Order", "type": "HAS_METHOD"},
        {"src": "param:shop.Order:add:item", "dst": "method:shop.Order:add", "type": "PARAM_OF"},
        {"src": "param:shop.Order:add:qty", "dst": "method:shop.Order:add", "type": "PARAM_OF"},
        {"src": "type:shop.Priced", "dst": "method:shop.Priced:price", "type": "HAS_METHOD"},
        {"src": "type:shop.Order", "dst": "type:shop.Base", "type": "INHERITS"},
        {"src": "type:shop.Order", "dst": "type:shop.Priced", "type": "IMPLEMENTS"},
        {"src": "type:shop.Order", "dst": "type:shop.Item", "type": "ASSOCIATES"},
    ]
    return {"nodes": nodes, "edges": edges}


@pytest.fixture
def shop_cir():
    return make_shop_cir()
