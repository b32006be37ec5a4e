from django.contrib import admin

from .models import Customer, Invoice


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'image_url')
    search_fields = ('name', 'email')


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ('customer', 'amount', 'status', 'date')
    list_filter = ('status',)
    search_fields = ('customer__name', 'customer__email')
    readonly_fields = ('date',)
