import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from ..cir.model import NativeField, NativeMethod, ScriptMethod, ScriptVariable, TypeRef
from ..cir.modifiers import KEYWORDS, ModifierSet

logger = logging.getLogger(__name__)

Member = Union[NativeField, NativeMethod, ScriptVariable, ScriptMethod]


@dataclass
class DescribedType:
    type: TypeRef
    fields: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)


class CIRAdapter:
    """
    CIR debug JSON -> descriptors.

    cir format:
    {
      "nodes": [ { "id": "...", "kind": "TypeDecl", "attrs": {...} }, ... ],
      "edges": [ { "src": "...", "dst": "...", "type": "HAS_FIELD" }, ... ]
    }

    Uses edges:
      - HAS_FIELD, HAS_METHOD (type -> member)
      - PARAM_OF (param -> method, order of appearance = parameter order)
      - INHERITS, IMPLEMENTS (type -> type)

    With generated=True every type and member is reported as coming from
    the scripting engine (keyword modifiers, parameter names); otherwise
    as host-reflected (flag masks, no parameter names).
    """

    def __init__(self, generated: bool = False) -> None:
        self.generated = generated

    # ---------------- Helpers ----------------

    STRING_ATTRS = (
        "name", "kind", "visibility", "package",
        "type_name", "raw_type", "return_type", "raw_return_type",
    )

    def _checked_attrs(self, node_id: str, attrs: Any) -> Dict[str, Any]:
        """Raises ValueError for attrs the renderer cannot display."""
        if attrs is None:
            return {}
        if not isinstance(attrs, dict):
            raise ValueError(f"{node_id}: attrs must be an object")
        for key in self.STRING_ATTRS:
            if attrs.get(key) is not None and not isinstance(attrs[key], str):
                raise ValueError(f"{node_id}: {key} must be a string")
        mods = attrs.get("modifiers")
        if mods is not None and not (
            isinstance(mods, (list, tuple)) and all(isinstance(m, str) for m in mods)
        ):
            raise ValueError(f"{node_id}: modifiers must be a list of strings")
        return attrs

    def _index_cir(self, cir: Dict[str, Any]) -> Tuple[Dict[str, Dict[str, Any]], List[Dict[str, Any]]]:
        nodes = cir.get("nodes") or []
        edges = cir.get("edges") or []
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise ValueError("nodes and edges must be lists")

        nodes_by_id: Dict[str, Dict[str, Any]] = {}
        for n in nodes:
            if not isinstance(n, dict) or not isinstance(n.get("id"), str):
                raise ValueError("every node must be an object with a string id")
            nodes_by_id[n["id"]] = {**n, "attrs": self._checked_attrs(n["id"], n.get("attrs"))}

        for e in edges:
            if not isinstance(e, dict):
                raise ValueError("every edge must be an object")
            for key in ("src", "dst", "type"):
                if e.get(key) is not None and not isinstance(e[key], str):
                    raise ValueError(f"edge {key} must be a string")
        return nodes_by_id, edges

    def _modifiers_from_attrs(self, attrs: Dict[str, Any]) -> ModifierSet:
        """
        Combine tuple modifiers, visibility and is_static/is_abstract/is_final flags.
        Keywords the renderer does not know (e.g. "default") are dropped.
        """
        mods = attrs.get("modifiers") or ()
        kws = set(mods)

        visibility = attrs.get("visibility")
        if visibility in ("public", "protected", "private"):
            kws.add(visibility)
        for flag, kw in (("is_static", "static"), ("is_abstract", "abstract"), ("is_final", "final")):
            if attrs.get(flag):
                kws.add(kw)

        unknown = kws - KEYWORDS
        if unknown:
            logger.warning("Dropping unsupported modifiers %s on %s", sorted(unknown), attrs.get("name"))
        return ModifierSet(frozenset(kws & KEYWORDS))

    def _display_type(self, attrs: Dict[str, Any], raw_key: str, logical_key: str) -> TypeRef | None:
        name = attrs.get(raw_key) or attrs.get(logical_key)
        if not name:
            return None
        return TypeRef(name)

    def _type_ref(self, attrs: Dict[str, Any], supertype: TypeRef | None = None,
                  interfaces: Tuple[TypeRef, ...] = ()) -> TypeRef:
        name = attrs.get("name") or "UnknownType"
        is_interface = (attrs.get("kind") or "class").lower() == "interface"
        package = attrs.get("package")
        qualified = f"{package}.{name}" if package else name
        mods = self._modifiers_from_attrs(attrs)
        factory = TypeRef.generated if self.generated else TypeRef.native
        return factory(
            name,
            modifiers=mods,
            is_interface=is_interface,
            supertype=supertype,
            interfaces=interfaces,
            qualified_name=qualified,
        )

    def _shallow_ref(self, nodes_by_id: Dict[str, Dict[str, Any]], type_id: str) -> TypeRef:
        """Reference used inside extends/implements clauses; only the name is displayed."""
        node = nodes_by_id.get(type_id)
        if node is None:
            # unknown target: fall back to the last id segment
            return TypeRef(type_id.split(":")[-1].split(".")[-1])
        return self._type_ref(node.get("attrs", {}))

    # ---------------- Members ----------------

    def _field(self, attrs: Dict[str, Any]) -> Member:
        ftype = self._display_type(attrs, "raw_type", "type_name")
        mods = self._modifiers_from_attrs(attrs)
        if self.generated:
            return ScriptVariable(name=attrs.get("name") or "", type=ftype, modifiers=mods)
        return NativeField(name=attrs.get("name") or "", type=ftype, modifiers=mods.flags)

    def _method(self, attrs: Dict[str, Any], params: List[Dict[str, Any]]) -> Member:
        rtype = self._display_type(attrs, "raw_return_type", "return_type")
        ptypes = tuple(self._display_type(p, "raw_type", "type_name") for p in params)
        mods = self._modifiers_from_attrs(attrs)
        if self.generated:
            return ScriptMethod(
                name=attrs.get("name") or "",
                parameter_types=ptypes,
                parameter_names=tuple(p.get("name") or "" for p in params),
                return_type=rtype,
                modifiers=mods,
            )
        return NativeMethod(
            name=attrs.get("name") or "",
            parameter_types=ptypes,
            return_type=rtype,
            modifiers=mods.flags,
        )

    # ---------------- Entry point ----------------

    def to_descriptors(self, cir: Dict[str, Any]) -> List[DescribedType]:
        nodes_by_id, edges = self._index_cir(cir)

        type_ids = [nid for nid, n in nodes_by_id.items() if n.get("kind") == "TypeDecl"]
        inherits: Dict[str, List[str]] = {tid: [] for tid in type_ids}
        implements: Dict[str, List[str]] = {tid: [] for tid in type_ids}
        field_ids: Dict[str, List[str]] = {tid: [] for tid in type_ids}
        method_ids: Dict[str, List[str]] = {tid: [] for tid in type_ids}
        params_by_method: Dict[str, List[Dict[str, Any]]] = {}

        for e in edges:
            src = e.get("src")
            dst = e.get("dst")
            etype = e.get("type")
            if not src or not dst:
                continue

            if etype == "PARAM_OF":
                pnode = nodes_by_id.get(src)
                if pnode and pnode.get("kind") == "Parameter":
                    params_by_method.setdefault(dst, []).append(pnode.get("attrs", {}))
                continue

            if src not in inherits:
                continue
            if etype == "INHERITS":
                inherits[src].append(dst)
            elif etype == "IMPLEMENTS":
                implements[src].append(dst)
            elif etype == "HAS_FIELD" and dst in nodes_by_id:
                field_ids[src].append(dst)
            elif etype == "HAS_METHOD" and dst in nodes_by_id:
                method_ids[src].append(dst)

        described: List[DescribedType] = []
        for tid in type_ids:
            attrs = nodes_by_id[tid].get("attrs", {})
            is_interface = (attrs.get("kind") or "class").lower() == "interface"

            supers = [self._shallow_ref(nodes_by_id, d) for d in inherits[tid]]
            ifaces = [self._shallow_ref(nodes_by_id, d) for d in implements[tid]]
            if is_interface:
                # an interface's extends list names interfaces
                supertype = None
                ifaces = supers + ifaces
            else:
                supertype = supers[0] if supers else None

            dt = DescribedType(type=self._type_ref(attrs, supertype, tuple(ifaces)))
            for fid in field_ids[tid]:
                dt.fields.append(self._field(nodes_by_id[fid].get("attrs", {})))
            for mid in method_ids[tid]:
                mattrs = nodes_by_id[mid].get("attrs", {})
                if mattrs.get("is_constructor"):
                    logger.debug("Skipping constructor %s", mid)
                    continue
                dt.methods.append(self._method(mattrs, params_by_method.get(mid, [])))
            described.append(dt)

        logger.debug("Converted %d CIR types (generated=%s)", len(described), self.generated)
        return described
