'''Helper for plotting block averaging data.'''

# copyright: (c) 2015 James Spencer
# license: modified BSD license; see LICENSE for further details.

import matplotlib.pyplot as plt
import numpy

def plot_block_average(block_info, plotfile=None, plotshow=True):
    '''Plot the standard error against the block size.

Parameters
----------
block_info : :class:`pandas.DataFrame` or sequence of :class:`blockaverage.blocking.BlockStats`
    Block averaging data, as returned by either
    :func:`blockaverage.pd_utils.block_average` or
    :func:`blockaverage.blocking.block_average`.  Block sizes with an undefined
    (NaN) standard error are not plotted.
plotfile : string
    If not null, save the plot to the given filename.  If '-', then show the
    plot interactively.  See also ``plotshow``.
plotshow : bool
    If ``plotfile`` is not given or is '-', then show the plot interactively.

Returns
-------
fig : :class:`matplotlib.figure.Figure`
    plot of the block averaging data.
'''

    try:
        std_err = block_info['se'].values
        block_size = block_info.index.values
    except (TypeError, AttributeError):
        # Have the tuple of BlockStats rather than a DataFrame.
        block_size = numpy.array([stat.block_size for stat in block_info])
        std_err = numpy.array([stat.se for stat in block_info], dtype=float)

    defined = ~numpy.isnan(std_err)

    fig = plt.figure()
    ax = fig.add_subplot(1, 1, 1)
    ax.scatter(block_size[defined], std_err[defined])
    ax.set_xlabel('Block size')
    ax.set_ylabel('Standard Error')
    fig.tight_layout()

    if plotfile == '-' or (not plotfile and plotshow):
        plt.show()
    elif plotfile:
        fig.savefig(plotfile)

    return fig
