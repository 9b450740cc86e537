"""LibCST based Fixer Gateway."""

import logging

import libcst as cst

from view_contract_linter.domain.entities import ContractDiagnostic, FixOutcome
from view_contract_linter.domain.errors import SourceUnavailableError
from view_contract_linter.domain.protocols import FileSystemProtocol, FixerGatewayProtocol
from view_contract_linter.infrastructure.gateways.astroid_gateway import (
    AstroidGateway,
    AstroidTypeResolver,
)
from view_contract_linter.infrastructure.gateways.libcst_document import LibCSTDocument
from view_contract_linter.use_cases.fix_orchestrator import FixRegistry

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class LibCSTFixerGateway(FixerGatewayProtocol):
    """Gateway for applying registered view-contract fixes to files using LibCST."""

    def __init__(
        self,
        fix_registry: FixRegistry,
        astroid_gateway: AstroidGateway,
        filesystem: FileSystemProtocol,
    ) -> None:
        self._registry = fix_registry
        self._astroid = astroid_gateway
        self._filesystem = filesystem

    def apply_fix(
        self, diagnostic: ContractDiagnostic, create_backup: bool = False
    ) -> FixOutcome:
        """
        Apply the fix registered for diagnostic.code to the file it points at.

        The file is read and parsed fresh on every call. Raises
        FixNotAvailableError / DeclarationNotFoundError from the registry and
        SourceUnavailableError when the file cannot be read or parsed.
        """
        location = diagnostic.location
        if location is None or not location.path:
            raise SourceUnavailableError(
                f"{diagnostic.code} for '{diagnostic.type_name}' has no source location.")
        # Unknown codes fail before any I/O.
        self._registry.get(diagnostic.code)

        file_path = location.path
        try:
            source = self._filesystem.read_text(file_path)
        except OSError as exc:
            raise SourceUnavailableError(f"Cannot read {file_path}: {exc}") from exc

        module = self._astroid.parse_file(file_path)
        if module is None:
            raise SourceUnavailableError(f"Cannot parse {file_path}.")
        try:
            document = LibCSTDocument.from_source(
                file_path, source, AstroidTypeResolver(self._astroid, module))
        except cst.ParserSyntaxError as exc:
            raise SourceUnavailableError(f"Cannot parse {file_path}: {exc}") from exc

        patched = self._registry.apply(diagnostic.code, document, location)
        if patched.code == source:
            return FixOutcome(diagnostic, applied=False, reason="Fix produced no change.")

        backup_path = None
        if create_backup:
            backup_path = file_path + BACKUP_SUFFIX
            self._filesystem.copy_file(file_path, backup_path)
        self._filesystem.write_text(file_path, patched.code)
        self._astroid.clear_inference_cache()
        logger.info("Applied %s to %s in %s", diagnostic.code, diagnostic.type_name, file_path)
        return FixOutcome(diagnostic, applied=True, backup_path=backup_path)
