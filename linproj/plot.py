"""Plotting tools module."""

import matplotlib
import matplotlib.figure

from linproj.scatter import encode_labels


def projection_grid(axis_labels, n_cols=None, ax_size=(300, 300), margin=150,
                    spacing=125):
    """Create a figure with one fixed-size panel (in pixels) per projection.

    Inputs:
    :axis_labels -- List of (x label, y label) pairs, one per panel
    :n_cols -- Number of panels per row (default: all panels in one row)
    :ax_size -- Width and height of each panel
    :margin -- Space around the grid of panels
    :spacing -- Space between neighbouring panels

    Outputs:
    :fh -- Figure handle
    :axes -- Flat list of axes, in row-major order
    """
    n_panels = len(axis_labels)
    if n_cols is None:
        n_cols = n_panels
    n_rows = -(-n_panels // n_cols)
    ax_w, ax_h = ax_size

    # Figure size in pixels, converted to inches for matplotlib
    fig_w = ax_w * n_cols + spacing * (n_cols - 1) + 2 * margin
    fig_h = ax_h * n_rows + spacing * (n_rows - 1) + 2 * margin
    dpi = matplotlib.rcParams['figure.dpi']
    fh = matplotlib.figure.Figure(figsize=(fig_w / dpi, fig_h / dpi))

    axes = []
    for i, (x_label, y_label) in enumerate(axis_labels):
        r, c = divmod(i, n_cols)
        left = margin + c * (ax_w + spacing)
        bottom = fig_h - margin - (r + 1) * ax_h - r * spacing
        ax = fh.add_axes([left / fig_w, bottom / fig_h, ax_w / fig_w, ax_h / fig_h])
        ax.spines[['top', 'right']].set_visible(False)
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        axes.append(ax)

    return fh, axes


def class_colors(n_classes, cmap='tab10'):
    """Get one color per class from a qualitative colormap."""
    cmap = matplotlib.colormaps[cmap]
    return [cmap(i % cmap.N) for i in range(n_classes)]


def plot_projection(model, X, labels, ax_size=(300, 300)):
    """Plot data projected onto the first LDA components.

    With two or more components the first two are shown as a scatter plot.
    With a single component, a histogram is shown for each class.
    """
    Xp = model.project(X).to_numpy()
    classes, codes = encode_labels(labels)
    colors = class_colors(len(classes))
    names = model.component_names
    two_d = model.n_components >= 2

    y_label = names[1] if two_d else 'Count'
    fh, axes = projection_grid([(names[0], y_label)], ax_size=ax_size)
    ax = axes[0]
    for i, cls in enumerate(classes):
        mask = codes == i
        if two_d:
            ax.scatter(Xp[mask, 0], Xp[mask, 1], color=colors[i], label=str(cls))
        else:
            ax.hist(Xp[mask, 0], color=colors[i], alpha=0.5, label=str(cls))
    ax.legend(frameon=False)

    return fh
