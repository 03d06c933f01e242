from .chart_state import ChartState, create_chart_state
from .frame_notifier import MessageFrameNotifier

__all__ = ['ChartState', 'create_chart_state', 'MessageFrameNotifier']
