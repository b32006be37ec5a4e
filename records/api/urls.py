"""API URL routing for LedgerDesk."""
from django.urls import path

from .views import CustomerCollectionView, CustomerDetailView, InvoiceCollectionView, InvoiceDetailView

urlpatterns = [
    path('invoices/', InvoiceCollectionView.as_view(), name='api-invoices'),
    path('invoices/<uuid:pk>/', InvoiceDetailView.as_view(), name='api-invoice-detail'),
    path('customers/', CustomerCollectionView.as_view(), name='api-customers'),
    path('customers/<uuid:pk>/', CustomerDetailView.as_view(), name='api-customer-detail'),
]
