"""Background workers for the freelance desk"""
from .invoice_reconciler import InvoiceReconcilerWorker

__all__ = ["InvoiceReconcilerWorker"]
