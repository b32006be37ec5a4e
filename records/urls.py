from django.urls import path

from .views import auth_views, customer_views, dashboard_views, game_views, invoice_views

app_name = "records"

urlpatterns = [
    path('login/', auth_views.login_view, name='login'),
    path('logout/', auth_views.logout_view, name='logout'),

    path('dashboard/', dashboard_views.overview, name='dashboard'),

    path('dashboard/invoices/', invoice_views.invoice_list, name='invoice_list'),
    path('dashboard/invoices/create/', invoice_views.invoice_create, name='invoice_create'),
    path('dashboard/invoices/<uuid:invoice_id>/edit/', invoice_views.invoice_edit, name='invoice_edit'),
    path('dashboard/invoices/<uuid:invoice_id>/delete/', invoice_views.invoice_delete, name='invoice_delete'),

    path('dashboard/customers/', customer_views.customer_list, name='customer_list'),
    path('dashboard/customers/create/', customer_views.customer_create, name='customer_create'),
    path('dashboard/customers/<uuid:customer_id>/edit/', customer_views.customer_edit, name='customer_edit'),
    path('dashboard/customers/<uuid:customer_id>/delete/', customer_views.customer_delete, name='customer_delete'),

    path('dashboard/tic-tac-toe/', game_views.tic_tac_toe, name='tic_tac_toe'),
]
