import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from pct_chart.backend.main import create_app
from pct_chart.config.parameters import ChartConfig


@pytest.fixture
def client(csv_file):
    app = create_app(ChartConfig(data_path=str(csv_file)))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def broken_client(tmp_path):
    app = create_app(ChartConfig(data_path=str(tmp_path / 'missing.csv')))
    with TestClient(app) as client:
        yield client


def test_health_reports_loaded_data(client):
    body = client.get('/health').json()
    assert body['status'] == 'healthy'
    assert body['data_loaded'] is True


def test_page_contains_container(client):
    response = client.get('/')
    assert response.status_code == 200
    assert 'id="interactive-content"' in response.text
    assert 'id="graphic"' in response.text
    assert '/api/ws/chart' in response.text


def test_data_endpoint(client):
    body = client.get('/api/chart/data').json()
    assert body['count'] == 3
    assert [r['label'] for r in body['records']] == ['-10', '0', '10']
    assert [r['count'] for r in body['records']] == [-30, 0, 45]


def test_svg_endpoint(client):
    response = client.get('/api/chart/svg', params={'width': 940})
    assert response.status_code == 200
    assert response.headers['content-type'].startswith('image/svg+xml')
    assert 'width="940px"' in response.text


def test_svg_endpoint_uses_default_width(client):
    response = client.get('/api/chart/svg')
    assert 'width="940px"' in response.text


def test_svg_endpoint_rejects_zero_width(client):
    response = client.get('/api/chart/svg', params={'width': 0})
    assert response.status_code == 422


def test_svg_endpoint_rejects_huge_width(client):
    assert client.get('/api/chart/svg', params={'width': 1e308}).status_code == 422
    assert client.get('/api/chart/scene', params={'width': 1e308}).status_code == 422


def test_scene_endpoint(client):
    body = client.get('/api/chart/scene', params={'width': 375}).json()

    assert body['layout']['is_mobile'] is True
    assert body['geometry']['chart_width'] == 320
    assert body['geometry']['chart_height'] == 242
    assert body['domain'] == [-50, 50]
    assert body['zero_line'] is not None
    assert body['extra_tick']['label'] == '-20%'
    assert [t['label'] for t in body['x_ticks']] == ['', '0%', '']
    assert len(body['bars']) == 3


def test_missing_data_is_reported(broken_client):
    assert broken_client.get('/health').json()['data_loaded'] is False
    assert broken_client.get('/api/chart/svg').status_code == 503
    assert broken_client.get('/api/chart/data').status_code == 503


def test_ws_init_renders_and_notifies_height(client):
    with client.websocket_connect('/api/ws/chart') as ws:
        ws.send_json({'type': 'INIT', 'payload': {'width': 940}})

        render = ws.receive_json()
        assert render['type'] == 'RENDER'
        assert render['payload']['height'] == 529
        assert render['payload']['is_mobile'] is False
        assert render['payload']['markup'].startswith('<div class="graphic-wrapper">')

        height = ws.receive_json()
        assert height == {'type': 'HEIGHT', 'payload': {'height': 529}}


def test_ws_resize_burst_renders_latest_width(client):
    with client.websocket_connect('/api/ws/chart/test_session') as ws:
        ws.send_json({'type': 'RESIZE', 'payload': {'width': 800}})
        ws.send_json({'type': 'RESIZE', 'payload': {'width': 640}})
        ws.send_json({'type': 'RESIZE', 'payload': {'width': 375}})

        render = ws.receive_json()
        assert render['type'] == 'RENDER'
        assert render['payload']['width'] == 375
        assert render['payload']['is_mobile'] is True
        assert ws.receive_json()['payload']['height'] == 282

        ws.send_json({'type': 'ping'})
        assert ws.receive_json() == {'type': 'pong'}


def test_ws_reports_errors(client):
    with client.websocket_connect('/api/ws/chart') as ws:
        ws.send_json({'type': 'INIT', 'payload': {'width': 0}})
        error = ws.receive_json()
        assert error['type'] == 'ERROR'
        assert error['payload']['kind'] == 'render_precondition'

        ws.send_json({'type': 'INIT', 'payload': {'width': 30}})
        assert ws.receive_json()['payload']['kind'] == 'render_precondition'

        ws.send_json({'type': 'UNKNOWN'})
        assert ws.receive_json()['payload']['kind'] == 'invalid_message'

        ws.send_text('not json')
        assert ws.receive_json()['payload']['kind'] == 'invalid_message'


def test_ws_without_data_reports_load_error(broken_client):
    with broken_client.websocket_connect('/api/ws/chart') as ws:
        ws.send_json({'type': 'INIT', 'payload': {'width': 940}})
        error = ws.receive_json()
        assert error['type'] == 'ERROR'
        assert error['payload']['kind'] == 'data_load'


def test_ws_binary_frame_ends_session(client):
    with client.websocket_connect('/api/ws/chart') as ws:
        ws.send_bytes(b'\x00')
        with pytest.raises(WebSocketDisconnect) as exc:
            ws.receive_json()
        assert exc.value.code == 1011

    assert client.get('/health').json()['sessions'] == 0


def test_ws_rejects_duplicate_session_id(client):
    manager = client.app.state.session_manager

    with client.websocket_connect('/api/ws/chart/shared') as first:
        with pytest.raises(WebSocketDisconnect) as exc:
            with client.websocket_connect('/api/ws/chart/shared'):
                pass
        assert exc.value.code == 1008

        first.send_json({'type': 'ping'})
        assert first.receive_json() == {'type': 'pong'}
        assert manager.connection_count == 1

    assert client.get('/health').json()['sessions'] == 0
