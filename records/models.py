from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone


class Customer(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254)
    image_url = models.CharField(max_length=255)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Invoice(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name="invoices")
    # Minor units (cents); always positive.
    amount = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True)
    date = models.DateField(default=timezone.localdate, editable=False)

    class Meta:
        ordering = ["-date"]
        constraints = [
            models.CheckConstraint(check=models.Q(amount__gt=0), name="invoice_amount_positive"),
            models.CheckConstraint(check=models.Q(status__in=["pending", "paid"]), name="invoice_status_valid"),
        ]

    def __str__(self):
        return f"{self.customer} - {self.amount / 100:.2f} ({self.status})"
