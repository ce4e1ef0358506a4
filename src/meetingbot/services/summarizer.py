# src/meetingbot/services/summarizer.py
"""
Meeting summarizer.

The real summarization backend is an external capability; ``MockSummarizer``
stands in for it with a deterministic summary and two action items. Any object
satisfying ``SummarizerProtocol`` can be injected instead.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

from ..core.dates import utcnow
from ..core.models import ActionItem, Meeting, SummaryResult


class MockSummarizer:
    """Summary naming the meeting title, action items due in 7 and 14 days."""
    
    ACTION_ITEM_OFFSETS_DAYS = (7, 14)
    
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utcnow
    
    async def summarize(self, meeting: Meeting) -> SummaryResult:
        now = self._clock()
        return SummaryResult(
            summary=f'Summary for meeting "{meeting.title}"',
            action_items=[
                ActionItem(title=f"Action Item {i}", due_date=now + timedelta(days=days))
                for i, days in enumerate(self.ACTION_ITEM_OFFSETS_DAYS, start=1)
            ],
        )
