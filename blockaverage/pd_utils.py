'''Pandas-based wrapper around ``blockaverage.blocking``.'''

# copyright: (c) 2014 James Spencer
# license: modified BSD license; see LICENSE for further details.

import pandas as pd
import blockaverage.blocking

def block_average(data, block_sizes=None, n_blocks=None):
    '''Block averaging analysis of correlated data.

Parameters
----------
data : :class:`pandas.Series`, :class:`pandas.DataFrame` or array_like
    Data to be analysed.  A :class:`pandas.DataFrame` must contain exactly one
    column.
block_sizes : int or sequence of ints
    Block sizes to evaluate.  Takes priority over ``n_blocks``.
n_blocks : int or sequence of ints
    Number of blocks to evaluate.

Returns
-------
block_info : :class:`pandas.DataFrame`
    Number of blocks, mean and standard error for each block size.  The index
    is the block size (in ascending order).  The standard error is NaN for
    block sizes which result in only a single block.

See also
--------
:func:`blockaverage.blocking.block_average`:
    numpy-based implementation; see for documentation and notes on the
    block averaging procedure and the validation of ``block_sizes`` and
    ``n_blocks``.
'''

    try:
        ncols = len(data.columns)
    except AttributeError:
        # Have Series or array rather than DataFrame.
        pass
    else:
        if ncols != 1:
            raise blockaverage.blocking.InvalidArgument(
                'data must contain a single variable; got %i columns' % (ncols,)
            )
        data = data.iloc[:, 0]

    try:
        values = data.values
    except AttributeError:
        values = data

    stats = blockaverage.blocking.block_average(values, block_sizes, n_blocks)

    block_info = pd.DataFrame(list(stats),
                              columns=blockaverage.blocking.BlockStats._fields)
    block_info.set_index('block_size', inplace=True)
    return block_info

def undefined_blocks(block_info):
    '''Block sizes for which the standard error is undefined.

Parameters
----------
block_info : :class:`pandas.DataFrame`
    Block averaging data as returned by :func:`block_average`.

Returns
-------
block_sizes : list of int
    block sizes whose standard error is NaN because the data set was not split
    into more than one block (i.e. block sizes greater than half the data
    length).
'''
    single = block_info[block_info['num_blocks'] == 1]
    return [int(size) for size in single.index]
