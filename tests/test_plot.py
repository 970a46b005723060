"""Unit tests for projection plots."""

import matplotlib
import matplotlib.figure
import pytest

from linproj.discriminant import fit
from linproj.plot import class_colors, plot_projection, projection_grid


def test_projection_grid_layout():
    labels = [(f'P{i}a', f'P{i}b') for i in range(5)]
    fh, axes = projection_grid(labels, n_cols=3, ax_size=(300, 200), margin=100, spacing=50)
    assert isinstance(fh, matplotlib.figure.Figure)
    assert len(axes) == len(fh.axes) == 5
    assert [ax.get_xlabel() for ax in axes] == [a for a, _ in labels]
    assert axes[4].get_ylabel() == 'P4b'

    # Two rows of three panels, sized in pixels
    dpi = matplotlib.rcParams['figure.dpi']
    width, height = fh.get_size_inches() * dpi
    assert width == pytest.approx(3 * 300 + 2 * 50 + 2 * 100)
    assert height == pytest.approx(2 * 200 + 50 + 2 * 100)

    # Panels are filled row by row, starting at the top left
    first, second, fourth = (axes[i].get_position() for i in (0, 1, 3))
    assert first.x0 == pytest.approx(100 / width)
    assert second.x0 > first.x0
    assert fourth.x0 == pytest.approx(first.x0)
    assert fourth.y0 < first.y0
    assert first.width * width == pytest.approx(300)
    assert not axes[0].spines['top'].get_visible()


def test_projection_grid_single_row():
    fh, axes = projection_grid([('LDA1', 'LDA2'), ('LDA1', 'LDA3')])
    assert axes[0].get_position().y0 == pytest.approx(axes[1].get_position().y0)


def test_class_colors():
    colors = class_colors(12)
    assert len(colors) == 12
    assert colors[0] == colors[10]


def test_plot_two_components(flower_frame):
    X = flower_frame.drop(columns='Species')
    model = fit(X, flower_frame['Species'])
    fh = plot_projection(model, X, flower_frame['Species'])
    ax = fh.axes[0]
    assert ax.get_xlabel() == 'LDA1'
    assert ax.get_ylabel() == 'LDA2'
    assert len(ax.collections) == 3


def test_plot_single_component(separated_data):
    X, y = separated_data
    model = fit(X, y)
    fh = plot_projection(model, X, y)
    ax = fh.axes[0]
    assert ax.get_xlabel() == 'LDA1'
    assert ax.get_ylabel() == 'Count'
