from .usage_schemas import QuotaUsageResponse, UsageResponse

__all__ = ["QuotaUsageResponse", "UsageResponse"]
