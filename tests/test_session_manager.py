import asyncio

from pct_chart.backend.core.session_manager import ChartSession, ChartSessionManager
from pct_chart.backend.services.chart_state import ChartState
from pct_chart.config.parameters import ChartConfig


def test_ending_stale_session_keeps_current_one():
    manager = ChartSessionManager(ChartState(config=ChartConfig()))
    stale = ChartSession('shared', websocket=None, state=manager.state)
    current = ChartSession('shared', websocket=None, state=manager.state)
    manager.sessions['shared'] = current

    asyncio.run(manager._end_session(stale))

    assert manager.sessions['shared'] is current
    assert manager.connection_count == 1


def test_shutdown_ends_every_session():
    manager = ChartSessionManager(ChartState(config=ChartConfig()))
    for session_id in ('a', 'b'):
        manager.sessions[session_id] = ChartSession(session_id, websocket=None, state=manager.state)

    asyncio.run(manager.shutdown())

    assert manager.connection_count == 0
