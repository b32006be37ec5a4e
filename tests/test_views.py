"""
Dashboard page tests: access control, form round trips and cached views.
"""
import uuid

from django.contrib.auth.models import User
from django.test import TestCase

from records.models import Customer, Invoice
from tests.factories import CustomerFactory, InvoiceFactory


class DashboardAccessTestCase(TestCase):
    def test_pages_require_login(self):
        for url in ['/dashboard/', '/dashboard/invoices/', '/dashboard/customers/create/', '/dashboard/tic-tac-toe/']:
            response = self.client.get(url)
            self.assertEqual(response.status_code, 302)
            self.assertTrue(response['Location'].startswith('/login/?next='))

    def test_root_redirects_to_dashboard(self):
        response = self.client.get('/')
        self.assertRedirects(response, '/dashboard/', fetch_redirect_response=False)

    def test_request_id_is_echoed(self):
        response = self.client.get('/login/', HTTP_X_REQUEST_ID='req-123')
        self.assertEqual(response['X-Request-ID'], 'req-123')

    def test_request_id_is_generated(self):
        response = self.client.get('/login/')
        self.assertTrue(response['X-Request-ID'])


class RecordPagesTestCase(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='admin', email='admin@example.com', password='testpass123')
        self.client.force_login(self.user)
        self.customer = CustomerFactory(name='Delba de Oliveira')

    def test_overview_totals(self):
        InvoiceFactory(customer=self.customer, amount=123456, status='paid')
        InvoiceFactory(customer=self.customer, amount=500, status='pending')

        response = self.client.get('/dashboard/')

        self.assertEqual(response.status_code, 200)
        cards = response.context['cards']
        self.assertEqual(cards['total_paid'], 123456)
        self.assertEqual(cards['total_pending'], 500)
        self.assertEqual(cards['invoice_count'], 2)
        self.assertEqual(cards['customer_count'], 1)
        self.assertContains(response, '$1,234.56')

    def test_create_invoice_redirects_to_list(self):
        response = self.client.post('/dashboard/invoices/create/', {
            'customer_id': str(self.customer.id),
            'amount': '42.50',
            'status': 'paid',
        })

        self.assertRedirects(response, '/dashboard/invoices/', fetch_redirect_response=False)
        self.assertEqual(Invoice.objects.get().amount, 4250)

    def test_create_invoice_errors_render_inline(self):
        response = self.client.post('/dashboard/invoices/create/', {'amount': '0'})

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Missing Fields. Failed to Create Invoice.')
        self.assertContains(response, 'Please enter an amount greater than $0.')
        self.assertContains(response, 'Please select an invoice status.')
        self.assertFalse(Invoice.objects.exists())

    def test_list_reflects_mutations(self):
        self.assertEqual(len(self.client.get('/dashboard/invoices/').context['invoices']), 0)

        self.client.post('/dashboard/invoices/create/', {
            'customer_id': str(self.customer.id),
            'amount': '10',
            'status': 'pending',
        })

        self.assertEqual(len(self.client.get('/dashboard/invoices/').context['invoices']), 1)

    def test_new_customer_appears_in_invoice_form(self):
        self.client.get('/dashboard/invoices/create/')

        self.client.post('/dashboard/customers/create/', {
            'name': 'Steph Dietz',
            'email': 'steph@dietz.com',
            'picture': '/customers/steph-dietz.png',
        })

        response = self.client.get('/dashboard/invoices/create/')
        self.assertContains(response, 'Steph Dietz')

    def test_edit_invoice_prefills_form(self):
        invoice = InvoiceFactory(customer=self.customer, amount=15795)

        response = self.client.get(f'/dashboard/invoices/{invoice.id}/edit/')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['form_data']['amount'], '157.95')

    def test_edit_unknown_invoice_is_404(self):
        response = self.client.get(f'/dashboard/invoices/{uuid.uuid4()}/edit/')
        self.assertEqual(response.status_code, 404)

    def test_delete_invoice_flashes_message(self):
        invoice = InvoiceFactory(customer=self.customer)

        response = self.client.post(f'/dashboard/invoices/{invoice.id}/delete/', follow=True)

        self.assertRedirects(response, '/dashboard/invoices/')
        self.assertContains(response, 'Deleted Invoice.')
        self.assertFalse(Invoice.objects.exists())

    def test_delete_requires_post(self):
        invoice = InvoiceFactory(customer=self.customer)
        response = self.client.get(f'/dashboard/invoices/{invoice.id}/delete/')
        self.assertEqual(response.status_code, 405)

    def test_delete_customer_with_invoices_flashes_error(self):
        InvoiceFactory(customer=self.customer)

        response = self.client.post(f'/dashboard/customers/{self.customer.id}/delete/', follow=True)

        self.assertContains(response, 'Database Error: Failed to Delete Customer.')
        self.assertTrue(Customer.objects.filter(pk=self.customer.pk).exists())

    def test_edit_customer(self):
        response = self.client.post(f'/dashboard/customers/{self.customer.id}/edit/', {
            'name': 'Delba Oliveira',
            'email': 'delba@oliveira.com',
            'picture': '/customers/delba.png',
        })

        self.assertRedirects(response, '/dashboard/customers/', fetch_redirect_response=False)
        self.customer.refresh_from_db()
        self.assertEqual(self.customer.name, 'Delba Oliveira')


class TicTacToePageTestCase(TestCase):
    def setUp(self):
        user = User.objects.create_user(username='player', password='testpass123')
        self.client.force_login(user)

    def test_moves_are_kept_in_session(self):
        for square in ['0', '3', '1', '4', '2']:
            self.client.post('/dashboard/tic-tac-toe/', {'square': square})

        response = self.client.get('/dashboard/tic-tac-toe/')
        self.assertContains(response, 'Winner: X')

    def test_reset(self):
        self.client.post('/dashboard/tic-tac-toe/', {'square': '4'})
        self.client.post('/dashboard/tic-tac-toe/', {'reset': '1'})

        response = self.client.get('/dashboard/tic-tac-toe/')
        self.assertContains(response, 'Next player: X')
        self.assertEqual(response.context['game'].squares, (None,) * 9)

    def test_invalid_square_is_ignored(self):
        response = self.client.post('/dashboard/tic-tac-toe/', {'square': 'nine'})
        self.assertEqual(response.status_code, 302)
        self.assertContains(self.client.get('/dashboard/tic-tac-toe/'), 'Next player: X')
