"""Tests for the SVG renderer"""

import re
from dataclasses import replace
from datetime import timedelta

import pytest

from refchart.config.defaults import StyleParams
from refchart.render.frame import build_frame
from refchart.render.overlay import build_overlay
from refchart.render.svg import SvgChartRenderer
from refchart.series.cursor import locate
from refchart.series.segmenter import split_by_reference


@pytest.fixture
def build(sample_series):
    def _build(config, reference=105):
        segments = split_by_reference(sample_series, reference)
        return build_frame(sample_series, segments, reference, config)
    return _build


class TestSvgChartRenderer:
    """Test SVG markup"""

    def test_empty_canvas(self):
        markup = SvgChartRenderer().render(None, width=640, height=320)
        assert markup.startswith("<svg")
        assert 'width="640"' in markup
        assert "<path" not in markup

    def test_segments_drawn(self, build, default_config):
        markup = SvgChartRenderer().render(build(default_config))

        assert markup.count('<path class="line') == 4
        assert markup.count('<path class="area') == 4
        assert markup.count('class="line above"') == 2
        assert markup.count('class="line below"') == 2
        assert 'stroke="green"' in markup
        assert 'stroke="red"' in markup
        assert 'opacity="0.25"' in markup
        assert markup.endswith("</svg>")

    def test_reference_and_grid(self, build, default_config):
        markup = SvgChartRenderer().render(build(default_config))

        assert 'class="reference"' in markup
        assert 'class="grid"' in markup
        assert 'stroke-dasharray="3,3"' in markup
        assert 'transform="translate(40,20)"' in markup

    def test_axes(self, build, default_config):
        markup = SvgChartRenderer().render(build(default_config))

        assert 'class="axis axis-x"' in markup
        assert ">May 01<" in markup
        assert ">114<" in markup

    def test_no_glow_by_default(self, build, default_config):
        markup = SvgChartRenderer().render(build(default_config))
        assert "<defs>" not in markup
        assert "filter=" not in markup

    def test_glow_variant(self, build, default_config):
        config = replace(default_config, style=StyleParams(glow=True, curve="monotone"))
        markup = SvgChartRenderer().render(build(config))

        assert "<defs>" in markup
        assert 'id="gainGlow"' in markup
        assert 'id="lossGlow"' in markup
        assert 'filter="url(#gainGlow)"' in markup
        assert "feGaussianBlur" in markup
        line = re.search(r'<path class="line below" d="([^"]+)"', markup)
        assert "C" in line.group(1)

    def test_overlay(self, build, default_config, sample_series, at_day):
        frame = build(default_config)
        query = at_day(0) + timedelta(hours=12)
        overlay = build_overlay(frame, query, locate(sample_series, query))
        markup = SvgChartRenderer().render(frame, overlay)

        assert 'class="overlay"' in markup
        assert 'class="marker"' in markup
        assert "Price: 102.50" in markup
        assert 'class="tooltip"' in markup
