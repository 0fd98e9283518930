from stayhub.services.base.service_result import ErrorCode, ServiceError, ServiceResult

__all__ = ["ErrorCode", "ServiceError", "ServiceResult"]
