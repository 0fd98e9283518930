from stayhub.services.payment.poller import PaymentStatusPoller
from stayhub.services.payment.session import PaymentSession

__all__ = ["PaymentSession", "PaymentStatusPoller"]
