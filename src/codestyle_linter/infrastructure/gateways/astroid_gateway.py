from collections.abc import Mapping
from typing import Optional

import astroid
from astroid import nodes

from codestyle_linter.domain.protocols import SymbolGatewayProtocol, TypeResolverProtocol
from codestyle_linter.domain.symbols import (
    Accessibility,
    AttributeUsage,
    BaseTypeClause,
    MethodDeclaration,
    SourceSpan,
    TypeDeclaration,
)

# Functions decorated with these are properties, not methods.
_PROPERTY_DECORATORS = frozenset(
    {"builtins.property", "functools.cached_property", "abc.abstractproperty"}
)
_PROPERTY_ACCESSORS = frozenset({"getter", "setter", "deleter"})


class AstroidGateway(TypeResolverProtocol, SymbolGatewayProtocol):
    """
    Symbol graph over astroid: type lookup by qualified name, decorators as
    attributes, class bases as base-type clauses.

    Type identities are astroid qualified names. ``modules`` are consulted
    before the astroid manager, so a host can hand in trees it already built.
    """

    def __init__(self, modules: Optional[Mapping[str, nodes.Module]] = None) -> None:
        self._modules: dict[str, nodes.Module] = dict(modules or {})

    # Type resolution

    def resolve_type(self, qualified_name: str) -> Optional[str]:
        """Longest importable module prefix wins; the rest is walked as attributes."""
        parts = qualified_name.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module = self._load_module(".".join(parts[:split]))
            if module is None:
                continue
            target = self._lookup(module, parts[split:])
            if target is not None:
                return target.qname()
        return None

    def _load_module(self, modname: str) -> Optional[nodes.Module]:
        if modname in self._modules:
            return self._modules[modname]
        try:
            return astroid.MANAGER.ast_from_module_name(modname)
        except astroid.AstroidBuildingError:
            return None

    @staticmethod
    def _lookup(
        scope: nodes.NodeNG, attrs: list[str]
    ) -> Optional[nodes.ClassDef | nodes.FunctionDef]:
        current: nodes.NodeNG = scope
        for attr in attrs:
            try:
                values = list(current.igetattr(attr))
            except astroid.AstroidError:
                return None
            found = next(
                (
                    v
                    for v in values
                    if isinstance(v, (nodes.ClassDef, nodes.FunctionDef, nodes.Module))
                ),
                None,
            )
            if found is None:
                return None
            current = found
        if isinstance(current, (nodes.ClassDef, nodes.FunctionDef)):
            return current
        return None

    # Declarations

    def method_declaration(self, node: object) -> Optional[MethodDeclaration]:
        """Only functions defined directly in a class body, other than properties, are methods."""
        if not isinstance(node, nodes.FunctionDef):
            return None
        parent = node.parent
        if not isinstance(parent, nodes.ClassDef):
            return None
        if self._is_property(node.decorators):
            return None
        containing_type = self.type_declaration(parent)
        if containing_type is None:
            return None
        return MethodDeclaration(
            name=node.name,
            accessibility=Accessibility.from_name(node.name),
            containing_type=containing_type,
            attributes=self._attributes(node.decorators),
            name_span=self._name_span(node),
            syntax=node,
        )

    def type_declaration(self, node: object) -> Optional[TypeDeclaration]:
        if not isinstance(node, nodes.ClassDef):
            return None
        module_name = node.root().name or ""
        path = self._path_of(node)
        return TypeDeclaration(
            name=node.name,
            qualified_name=node.qname(),
            assembly=module_name.split(".")[0],
            attributes=self._attributes(node.decorators),
            base_types=tuple(self._base_clause(base, path) for base in node.bases),
            span=self._name_span(node),
            syntax=node,
        )

    def _is_property(self, decorators: Optional[nodes.Decorators]) -> bool:
        if decorators is None:
            return False
        for decorator in decorators.nodes:
            # @client.setter, @client.deleter
            if isinstance(decorator, nodes.Attribute) and decorator.attrname in _PROPERTY_ACCESSORS:
                return True
            if self.identity_of(decorator) in _PROPERTY_DECORATORS:
                return True
        return False

    def _attributes(self, decorators: Optional[nodes.Decorators]) -> tuple[AttributeUsage, ...]:
        if decorators is None:
            return ()
        usages: list[AttributeUsage] = []
        for decorator in decorators.nodes:
            # @TestCase(1, 2) is identified by its callee
            target = decorator.func if isinstance(decorator, nodes.Call) else decorator
            usages.append(AttributeUsage(self.identity_of(target), syntax=decorator))
        return tuple(usages)

    def _base_clause(self, base: nodes.NodeNG, path: str) -> BaseTypeClause:
        if isinstance(base, nodes.Subscript):
            definition = self.identity_of(base.value)
            arguments = self._type_arguments(base.slice)
        else:
            definition = self.identity_of(base)
            arguments = ()
        return BaseTypeClause(
            definition=definition,
            type_arguments=arguments,
            span=self._span(base, path),
            syntax=base,
        )

    def _type_arguments(self, slice_node: nodes.NodeNG) -> tuple[str, ...]:
        elements = slice_node.elts if isinstance(slice_node, nodes.Tuple) else [slice_node]
        return tuple(self.identity_of(e) or e.as_string() for e in elements)

    @staticmethod
    def identity_of(expr: nodes.NodeNG) -> Optional[str]:
        """Qualified name of the class or function ``expr`` evaluates to, if inferable."""
        try:
            for inferred in expr.infer():
                if isinstance(inferred, (nodes.ClassDef, nodes.FunctionDef)):
                    return inferred.qname()
        except astroid.InferenceError:
            return None
        return None

    # Locations

    @staticmethod
    def _path_of(node: nodes.NodeNG) -> str:
        root = node.root()
        return getattr(root, "file", None) or getattr(root, "name", "") or ""

    @staticmethod
    def _span(node: nodes.NodeNG, path: str) -> SourceSpan:
        return SourceSpan(
            path=path,
            line=node.lineno or 0,
            column=node.col_offset or 0,
            end_line=node.end_lineno,
            end_column=node.end_col_offset,
        )

    def _name_span(self, node: nodes.FunctionDef | nodes.ClassDef) -> SourceSpan:
        """Span of the ``def name`` / ``class name`` header, the range Pylint reports for these nodes."""
        path = self._path_of(node)
        position = getattr(node, "position", None)
        if position is None:
            return self._span(node, path)
        return SourceSpan(
            path=path,
            line=position.lineno,
            column=position.col_offset,
            end_line=position.end_lineno,
            end_column=position.end_col_offset,
        )
