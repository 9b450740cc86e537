"""LibCST Transformers for code fixes."""

import libcst as cst


class EnsureImportTransformer(cst.CSTTransformer):
    """Transformer adding ``import <module>`` unless the module is already imported plainly."""

    def __init__(self, module: str) -> None:
        self.module = module
        self.has_import = False

    def visit_Import(self, node: cst.Import) -> None:
        for alias in node.names:
            if alias.asname is None and self._dotted(alias.name) == self.module:
                self.has_import = True

    def leave_Module(self, original_node: cst.Module, updated_node: cst.Module) -> cst.Module:
        if self.has_import:
            return updated_node

        import_stmt = cst.Import(names=[cst.ImportAlias(name=self._expression(self.module))])

        new_body = list(updated_node.body)
        insert_idx = 0
        for i, stmt in enumerate(new_body):
            if not isinstance(stmt, cst.SimpleStatementLine):
                continue
            for item in stmt.body:
                if isinstance(item, (cst.Import, cst.ImportFrom)):
                    insert_idx = i + 1
                    break
                # Keep a module docstring first.
                if i == 0 and isinstance(item, cst.Expr) and isinstance(item.value, cst.SimpleString):
                    insert_idx = max(insert_idx, 1)

        new_body.insert(insert_idx, cst.SimpleStatementLine(body=[import_stmt]))
        self.has_import = True
        return updated_node.with_changes(body=new_body)

    @staticmethod
    def _expression(dotted: str) -> cst.Attribute | cst.Name:
        parts = dotted.split(".")
        expr: cst.Attribute | cst.Name = cst.Name(parts[0])
        for part in parts[1:]:
            expr = cst.Attribute(value=expr, attr=cst.Name(part))
        return expr

    @staticmethod
    def _dotted(expr: cst.BaseExpression) -> str:
        if isinstance(expr, cst.Name):
            return expr.value
        if isinstance(expr, cst.Attribute):
            return f"{EnsureImportTransformer._dotted(expr.value)}.{expr.attr.value}"
        return ""
