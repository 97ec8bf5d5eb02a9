"""
Reference resolver for $ref and allOf resolution.

Resolves $ref pointers to their targets in the document and flattens allOf
compositions into a single merged schema. The source document is never
modified; merged schemas are new dictionaries.
"""

from __future__ import annotations

from typing import Any

from ...exceptions import CyclicReferenceError, UnsupportedReferenceError

LOCAL_REF_PREFIX = "#/"


def deep_merge(*schemas: dict[str, Any] | None) -> dict[str, Any]:
    """
    Merge schemas left to right into a new dictionary.

    Nested dictionaries are merged recursively, lists present in more than one
    source are concatenated, and any other value is overwritten by the later
    source. ``None`` sources are skipped.

    Example:
        deep_merge({"a": [1, 2], "b": 1}, {"a": [3], "b": 2}) -> {"a": [1, 2, 3], "b": 2}
    """
    merged: dict[str, Any] = {}
    for schema in schemas:
        if not schema:
            continue
        for key, value in schema.items():
            merged[key] = _merge_value(merged.get(key), value) if key in merged else _copy_value(value)
    return merged


def _merge_value(current: Any, value: Any) -> Any:
    if isinstance(current, list) and isinstance(value, list):
        return current + _copy_value(value)
    if isinstance(current, dict) and isinstance(value, dict):
        return deep_merge(current, value)
    return _copy_value(value)


def _copy_value(value: Any) -> Any:
    if isinstance(value, dict):
        return deep_merge(value)
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    return value


class ReferenceResolver:
    """Resolves $ref and allOf against one document."""

    def __init__(self, document: dict[str, Any]):
        """
        Initialize the resolver.

        Args:
            document: The parsed Swagger document all $ref pointers refer to
        """
        self.document = document

    def lookup(self, ref: str) -> Any:
        """
        Return the object a document-local $ref points to.

        Args:
            ref: The $ref string (e.g., "#/definitions/Pet")

        Raises:
            UnsupportedReferenceError: If the reference is not document-local or
                does not point at anything in the document
        """
        if not isinstance(ref, str) or not ref.startswith(LOCAL_REF_PREFIX):
            raise UnsupportedReferenceError(f"No support for refs that don't start with '{LOCAL_REF_PREFIX}': {ref}")

        current: Any = self.document
        for segment in ref[len(LOCAL_REF_PREFIX) :].split("/"):
            # JSON Pointer escaping (RFC 6901)
            segment = segment.replace("~1", "/").replace("~0", "~")
            if isinstance(current, dict) and segment in current:
                current = current[segment]
            elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
                current = current[int(segment)]
            else:
                raise UnsupportedReferenceError(f"Cannot resolve $ref '{ref}': '{segment}' not found")
        return current

    def resolve(
        self,
        schema: dict[str, Any],
        resolve_ref: bool = True,
        resolve_all_of: bool = False,
        ignore_ref: str | None = None,
    ) -> dict[str, Any]:
        """
        Resolve $ref and/or allOf until neither is left.

        The referenced object comes first, then each allOf member in order,
        then the schema's own fields, so local declarations win.

        Args:
            schema: The schema to resolve
            resolve_ref: Replace a $ref with the object it points to
            resolve_all_of: Merge allOf members into the schema
            ignore_ref: A $ref that is dropped instead of merged. Used for a
                subclass' superclass, which becomes a model of its own.

        Returns:
            A new, merged schema
        """
        return self._resolve(schema, resolve_ref, resolve_all_of, ignore_ref, [])

    def _resolve(
        self,
        schema: dict[str, Any],
        resolve_ref: bool,
        resolve_all_of: bool,
        ignore_ref: str | None,
        ref_chain: list[str],
    ) -> dict[str, Any]:
        ref = schema.get("$ref") if resolve_ref else None
        all_of = schema.get("allOf") if resolve_all_of else None

        local = {key: value for key, value in schema.items() if not (key == "$ref" and resolve_ref) and not (key == "allOf" and resolve_all_of)}
        if not ref and not all_of:
            return local

        from_ref = None
        if ref and ref != ignore_ref:
            if ref in ref_chain:
                raise CyclicReferenceError([*ref_chain, ref])
            ref_chain = [*ref_chain, ref]
            from_ref = self.lookup(ref)

        # Members always get their own $ref resolved, otherwise merging several
        # referenced members would keep only the last $ref
        from_all_of = [self._resolve(member, True, resolve_all_of, ignore_ref, ref_chain) for member in all_of or []]

        merged = deep_merge(from_ref, *from_all_of, local)

        # A resolved target may carry $ref or allOf of its own
        return self._resolve(merged, resolve_ref, resolve_all_of, ignore_ref, ref_chain)

    def resolve_ref(self, schema: dict[str, Any], ignore_ref: str | None = None) -> dict[str, Any]:
        """Resolve only $ref."""
        return self.resolve(schema, resolve_ref=True, resolve_all_of=False, ignore_ref=ignore_ref)

    def resolve_ref_and_all_of(self, schema: dict[str, Any], ignore_ref: str | None = None) -> dict[str, Any]:
        """Resolve both $ref and allOf."""
        return self.resolve(schema, resolve_ref=True, resolve_all_of=True, ignore_ref=ignore_ref)
