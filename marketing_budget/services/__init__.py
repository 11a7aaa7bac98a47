"""Service layer: repositories, auditing, data transfer and templates."""

from marketing_budget.services.audit_logger import (
    AuditLogger,
    InMemoryAuditLogger,
    LoggingAuditLogger,
)
from marketing_budget.services.audited_repository import AuditedBudgetRepository
from marketing_budget.services.data_transfer import (
    ImportResult,
    ImportSummary,
    analyse_import,
    export_selective,
    import_selective,
    load_export_document,
    seed_repository,
    write_export_document,
)
from marketing_budget.services.json_file_repository import JsonFileBudgetRepository
from marketing_budget.services.repository import (
    BudgetRepository,
    InMemoryBudgetRepository,
)
from marketing_budget.services.template_service import (
    InMemoryTemplateService,
    apply_template,
    create_template_from_budget,
)

__all__ = [
    "AuditLogger",
    "AuditedBudgetRepository",
    "BudgetRepository",
    "ImportResult",
    "ImportSummary",
    "InMemoryAuditLogger",
    "InMemoryBudgetRepository",
    "InMemoryTemplateService",
    "JsonFileBudgetRepository",
    "LoggingAuditLogger",
    "analyse_import",
    "apply_template",
    "create_template_from_budget",
    "export_selective",
    "import_selective",
    "load_export_document",
    "seed_repository",
    "write_export_document",
]
