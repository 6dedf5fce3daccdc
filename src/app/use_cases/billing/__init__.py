"""Billing use cases: trials and invoices"""
from .record_trial import RecordTrial
from .list_trials import ListProjectTrials, ListTrials
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice, ListInvoices
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .reconcile_invoice_totals import ReconcileInvoiceTotals
from .dtos import (
    RecordTrialCommandDTO,
    TrialResponseDTO,
    InvoiceItemInputDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoiceDiscrepancyDTO,
    InvoiceReconciliationResultDTO,
)

__all__ = [
    "RecordTrial",
    "ListProjectTrials",
    "ListTrials",
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "UpdateInvoice",
    "DeleteInvoice",
    "ReconcileInvoiceTotals",
    "RecordTrialCommandDTO",
    "TrialResponseDTO",
    "InvoiceItemInputDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceItemDTO",
    "InvoiceResponseDTO",
    "ListInvoicesResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoiceDiscrepancyDTO",
    "InvoiceReconciliationResultDTO",
]
