import pytest

from pct_chart.core.errors import RenderPreconditionError
from pct_chart.visualization.frame import FrameNotifier
from pct_chart.visualization.renderer import ChartRenderer, RenderRequest


class RecordingNotifier(FrameNotifier):
    def __init__(self):
        self.heights = []

    def resize(self, height):
        self.heights.append(height)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def renderer(notifier):
    return ChartRenderer(notifier=notifier)


def test_render_produces_pixel_sized_svg(renderer, mixed_dataset):
    result = renderer.render(RenderRequest('#graphic', 940, mixed_dataset))

    assert '<svg' in result.svg
    assert 'width="940px"' in result.svg
    assert 'height="529px"' in result.svg
    assert result.height == 529
    assert not result.is_mobile


def test_render_draws_bars_ticks_and_zero_line(renderer, mixed_dataset):
    svg = renderer.render(RenderRequest('#graphic', 940, mixed_dataset)).svg

    assert svg.count('id="bar-') == len(mixed_dataset)
    assert 'id="bar--10"' in svg
    assert '-20%' in svg
    assert '0%' in svg
    assert 'id="zero-line"' in svg
    assert 'id="zero"' in svg


def test_render_skips_zero_line_without_negatives(renderer, positive_dataset):
    svg = renderer.render(RenderRequest('#graphic', 940, positive_dataset)).svg
    assert 'id="zero-line"' not in svg


def test_render_replaces_container_markup(renderer, mixed_dataset):
    request = RenderRequest('#graphic', 940, mixed_dataset)
    first = renderer.render(request)
    second = renderer.render(request)
    container = renderer.container('#graphic')

    assert container.render_count == 2
    assert container.markup == second.markup
    assert container.markup.count('<svg') == 1
    assert container.markup.startswith('<div class="graphic-wrapper"><svg')
    assert first.svg == second.svg


def test_render_notifies_frame_once_per_render(renderer, notifier, mixed_dataset):
    renderer.render(RenderRequest('#graphic', 940, mixed_dataset))
    renderer.render(RenderRequest('#graphic', 375, mixed_dataset))

    assert notifier.heights == [529, 282]


def test_render_rejects_zero_width(renderer, notifier, mixed_dataset):
    with pytest.raises(RenderPreconditionError):
        renderer.render(RenderRequest('#graphic', 0, mixed_dataset))

    assert notifier.heights == []
    assert renderer.container('#graphic').markup == ''
