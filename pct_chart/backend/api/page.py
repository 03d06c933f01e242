"""
图表页面
页面脚本测量容器宽度, 通过 WebSocket 发送 INIT / RESIZE,
用返回的标记替换容器内容, 并把高度通知转发给父页面
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


PAGE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Percent change distribution</title>
    <style>
        body { font-family: Helvetica, Arial, sans-serif; margin: 0; padding: 0; }
        #interactive-content { width: 100%; }
        .graphic-wrapper svg { display: block; }
        .error { color: #c4524b; font-size: 13px; }
    </style>
</head>
<body>
    <div id="interactive-content">
        <div id="__CONTAINER_ID__"></div>
    </div>

    <script>
        (function () {
            var content = document.getElementById('interactive-content');
            var graphic = document.querySelector('__CONTAINER__');
            var protocol = window.location.protocol === 'https:' ? 'wss://' : 'ws://';
            var ws = new WebSocket(protocol + window.location.host + '/api/ws/chart');

            function measure() {
                return Math.floor(content.getBoundingClientRect().width);
            }

            function send(type) {
                if (ws.readyState === WebSocket.OPEN) {
                    ws.send(JSON.stringify({ type: type, payload: { width: measure() } }));
                }
            }

            ws.onopen = function () {
                send('INIT');
                // 节流在服务端完成
                window.addEventListener('resize', function () { send('RESIZE'); });
            };

            ws.onmessage = function (event) {
                var msg = JSON.parse(event.data);
                if (msg.type === 'RENDER') {
                    graphic.innerHTML = msg.payload.markup;
                } else if (msg.type === 'HEIGHT') {
                    if (window.parent !== window) {
                        window.parent.postMessage({ type: 'height', height: msg.payload.height }, '*');
                    }
                } else if (msg.type === 'ERROR') {
                    console.error('[chart] ' + msg.payload.kind + ': ' + msg.payload.message);
                }
            };
        })();
    </script>
</body>
</html>
"""


def render_page(container: str) -> str:
    """按容器选择器生成页面"""
    return (PAGE_HTML
            .replace('__CONTAINER_ID__', container.lstrip('#'))
            .replace('__CONTAINER__', container))


@router.get("/")
async def chart_page(request: Request) -> HTMLResponse:
    """图表页面"""
    config = request.app.state.config
    return HTMLResponse(render_page(config.container))
