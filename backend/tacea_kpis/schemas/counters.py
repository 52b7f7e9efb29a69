import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CounterField(str, enum.Enum):
    spend = "spend"
    impressions = "impressions"
    clicks = "clicks"
    messages_started = "messagesStarted"
    active_conversations = "activeConversations"
    quotes_sent = "quotesSent"
    sales_closed = "salesClosed"
    total_revenue = "totalRevenue"


class RawCounters(BaseModel):
    """The eight funnel counters as entered; an empty string means unset."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    spend: str = ""
    impressions: str = ""
    clicks: str = ""
    messages_started: str = ""
    active_conversations: str = ""
    quotes_sent: str = ""
    sales_closed: str = ""
    total_revenue: str = ""


class CounterValues(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    spend: float = 0.0
    impressions: float = 0.0
    clicks: float = 0.0
    messages_started: float = 0.0
    active_conversations: float = 0.0
    quotes_sent: float = 0.0
    sales_closed: float = 0.0
    total_revenue: float = 0.0


class FieldUpdate(BaseModel):
    value: str = ""


class PresetApply(BaseModel):
    name: str


class PresetResponse(BaseModel):
    name: str
    counters: RawCounters
