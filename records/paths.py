"""Logical view paths. Each one names a page whose cached data depends on stored records."""

DASHBOARD = "/dashboard/"
INVOICES = "/dashboard/invoices/"
INVOICE_CREATE = "/dashboard/invoices/create/"
CUSTOMERS = "/dashboard/customers/"
LOGIN = "/login/"
