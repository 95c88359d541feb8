import logging
from unittest.mock import MagicMock

import pytest

from modules.customers.dtos import CreateCustomerRequest
from modules.customers.exceptions import CustomerEmailUnavailable, CustomerNotFound
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_string_values_untouched(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "customer.created", "customer_id": 7}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["customer_id"] == 7

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "customer.created", "email": "john@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["email"] == "john@example.com"
        assert result["event"] == "customer.created"


def _events(caplog):
    """Event names of the structlog records captured so far."""
    return [r.msg["event"] for r in caplog.records if isinstance(r.msg, dict)]


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda c: c
    return repo


@pytest.fixture()
def service(mock_repo):
    return CustomerService(repository=mock_repo)


class TestServiceLogging:
    def test_create_emits_event(self, service, mock_repo, caplog):
        mock_repo.find_by_email.return_value = None

        with caplog.at_level(logging.INFO):
            service.create_customer(
                CreateCustomerRequest(name="John", email="john@example.com")
            )

        assert "customer.created" in _events(caplog)

    def test_update_emits_event(self, service, mock_repo, caplog):
        mock_repo.find_by_id.return_value = Customer(
            id=1, name="John", email="john@example.com"
        )
        mock_repo.find_by_email.return_value = None

        with caplog.at_level(logging.INFO):
            service.update_customer(1, "Jane", "jane@example.com", "456 Avenue")

        assert "customer.updated" in _events(caplog)

    def test_delete_emits_event(self, service, mock_repo, caplog):
        mock_repo.exists_by_id.return_value = True

        with caplog.at_level(logging.INFO):
            service.delete_customer(1)

        assert "customer.deleted" in _events(caplog)

    def test_not_found_logs_nothing(self, service, mock_repo, caplog):
        mock_repo.find_by_id.return_value = None
        mock_repo.exists_by_id.return_value = False

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(CustomerNotFound):
                service.get_customer_by_id(1)
            with pytest.raises(CustomerNotFound):
                service.update_customer(1, "Jane", "jane@example.com", "456 Avenue")
            with pytest.raises(CustomerNotFound):
                service.delete_customer(1)

        assert not [e for e in _events(caplog) if e.startswith("customer.")]

    def test_email_unavailable_logs_nothing(self, service, mock_repo, caplog):
        mock_repo.find_by_email.return_value = Customer(
            id=2, name="Jane", email="jane@example.com"
        )
        mock_repo.find_by_id.return_value = Customer(
            id=1, name="John", email="john@example.com"
        )

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(CustomerEmailUnavailable):
                service.create_customer(
                    CreateCustomerRequest(name="Jane", email="jane@example.com")
                )
            with pytest.raises(CustomerEmailUnavailable):
                service.update_customer(1, "John", "jane@example.com", "123 Street")

        assert not [e for e in _events(caplog) if e.startswith("customer.")]


class TestRepositoryLogging:
    def test_save_emits_event(self, caplog):
        repo = CustomerDjangoRepository()

        with caplog.at_level(logging.INFO):
            customer = repo.save(Customer(name="John", email="john@example.com"))

        saved = [
            r.msg
            for r in caplog.records
            if isinstance(r.msg, dict) and r.msg["event"] == "customer.saved"
        ]
        assert len(saved) == 1
        assert saved[0]["customer_id"] == customer.id
        assert saved[0]["is_new"] is True

    def test_delete_emits_event(self, caplog):
        repo = CustomerDjangoRepository()
        customer = repo.save(Customer(name="John", email="john@example.com"))

        with caplog.at_level(logging.INFO):
            repo.delete_by_id(customer.id)

        assert "customer.deleted_row" in _events(caplog)

    def test_delete_unknown_id_logs_nothing(self, caplog):
        repo = CustomerDjangoRepository()

        with caplog.at_level(logging.INFO):
            repo.delete_by_id(999_999)

        assert "customer.deleted_row" not in _events(caplog)
