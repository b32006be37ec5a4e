from decimal import Decimal

from django import template

register = template.Library()


@register.filter
def cents(value):
    """Format an amount in minor units as dollars: 123456 -> "$1,234.56"."""
    if value in (None, ""):
        return ""
    return f"${Decimal(int(value)) / 100:,.2f}"
