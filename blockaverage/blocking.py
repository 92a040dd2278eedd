'''Block averaging of a single correlated data set over many block sizes.'''

# copyright: (c) 2014 James Spencer
# license: modified BSD license; see LICENSE for further details.

import collections
import math
import numbers
import warnings

import numpy

BlockStats = collections.namedtuple('BlockStats',
                                    'block_size num_blocks mean se'.split())

# Smallest number of blocks in the automatically generated set of block counts.
DEFAULT_MIN_BLOCKS = 5

class InvalidArgument(ValueError):
    '''Raised when the data or the requested block sizes/counts are unusable.'''

class UndefinedStatistic(RuntimeWarning):
    '''Warned when the standard error cannot be defined for some block sizes.

The standard error of a single block mean is undefined, so any block size
which gives only one block (i.e. more than half the data length) gets a NaN
standard error.
'''

def _as_data(data):
    '''Convert data to a 1D float array, raising InvalidArgument if impossible.'''
    try:
        arr = numpy.asarray(data)
    except (TypeError, ValueError):
        raise InvalidArgument('data must be a sequence of real numbers')
    # Strings (even numeric ones) and other objects are not data.
    if arr.dtype.kind not in 'biuf':
        raise InvalidArgument('data must be a sequence of real numbers; got '
                              'dtype %s' % (arr.dtype,))
    if arr.ndim != 1:
        raise InvalidArgument('data must be one-dimensional, not %i-dimensional'
                              % (arr.ndim,))
    if arr.size == 0:
        raise InvalidArgument('data must contain at least one value')
    return arr.astype(float)

def _check_sizes(values, name, ndata):
    '''Validate a set of block sizes or block counts.

Parameters
----------
values : int or sequence of ints
    block sizes or block counts supplied by the user.
name : string
    name of the parameter being checked, used in error messages.
ndata : int
    number of data points.

Returns
-------
values : :class:`numpy.ndarray`
    1D integer array of the validated values.

Raises
------
InvalidArgument
    if ``values`` is empty, non-numeric, non-integral or outside ``(0, ndata]``.
'''
    if isinstance(values, (set, frozenset)):
        values = list(values)
    values = numpy.array(values, dtype=object, ndmin=1).ravel()
    if values.size == 0:
        raise InvalidArgument('%s must contain at least one value' % (name,))
    for val in values:
        # bool is a subclass of int but is never a sensible size.
        if isinstance(val, bool) or not isinstance(val, numbers.Real):
            raise InvalidArgument('%s must be a numeric vector; got %r'
                                  % (name, val))
        if (not isinstance(val, numbers.Integral)
                and (not math.isfinite(val) or val != int(val))):
            raise InvalidArgument('%s must contain integers; got %r'
                                  % (name, val))
        if not 0 < val <= ndata:
            raise InvalidArgument('%s is meaningless: every value must be in '
                                  '(0, %i]; got %r' % (name, ndata, val))
    return numpy.array([int(val) for val in values], dtype=int)

def resolve_block_sizes(ndata, block_sizes=None, n_blocks=None):
    '''Get the block sizes to use for a data set of a given length.

Parameters
----------
ndata : int
    number of data points.
block_sizes : int or sequence of ints
    number of data points in each block.  Takes priority over ``n_blocks``,
    which is then ignored.
n_blocks : int or sequence of ints
    number of blocks into which the data set is split.  Each is converted to
    a block size of ``ndata // n_blocks``.  If neither ``block_sizes`` nor
    ``n_blocks`` is given, block counts from 5 to ``ndata`` (inclusive) are
    used.  As that range is empty for data sets with fewer than 5 points,
    these instead use a single block count of ``ndata`` (i.e. a block size of
    1) so that at least one block size is always evaluated.

Returns
-------
block_sizes : :class:`numpy.ndarray`
    sorted, unique block sizes, each in the range ``[1, ndata]``.

Raises
------
InvalidArgument
    if the parameter in use contains a value which is not an integer in
    ``(0, ndata]``.
'''
    if block_sizes is not None:
        sizes = _check_sizes(block_sizes, 'block_sizes', ndata)
    else:
        if n_blocks is not None:
            counts = _check_sizes(n_blocks, 'n_blocks', ndata)
        else:
            counts = numpy.arange(min(DEFAULT_MIN_BLOCKS, ndata), ndata+1)
        sizes = ndata // counts
    return numpy.unique(sizes)

def block_means(data, block_size):
    '''Split data into contiguous blocks and average each block.

Parameters
----------
data : :class:`numpy.ndarray`
    1D array of data points.
block_size : int
    number of data points per block.

Returns
-------
means : :class:`numpy.ndarray`
    mean of each of the ``len(data) // block_size`` blocks.  Blocks are formed
    in order with no gaps or overlap; the final block runs to the end of the
    data set and so contains any data points left over after dividing the data
    into blocks of length ``block_size``.
'''
    nblocks = len(data) // block_size
    full = (nblocks-1)*block_size
    means = data[:full].reshape(nblocks-1, block_size).mean(axis=1)
    return numpy.append(means, data[full:].mean())

def block_stats(data, block_size):
    '''Mean and standard error of data divided into blocks of a given size.

.. default-role:: math

Parameters
----------
data : :class:`numpy.ndarray`
    1D array of data points.
block_size : int
    number of data points per block.

Returns
-------
stats : :class:`BlockStats`
    block size, number of blocks, mean of the block means and the standard
    error.  The standard error is NaN if there is only one block.

Notes
-----
For `n` block means, `\\bar{x}_i`, with mean `\\bar{x}`, the standard error is

.. math::

    \\sigma = \\sqrt{\\frac{1}{n(n-1)} \\sum_i (\\bar{x}_i - \\bar{x})^2},

i.e. the population standard deviation of the block means divided by
`\\sqrt{n-1}`.
'''
    means = block_means(data, block_size)
    nblocks = len(means)
    mean = means.mean()
    if nblocks > 1:
        se = numpy.std(means) / numpy.sqrt(nblocks - 1)
    else:
        se = float('NaN')
    return BlockStats(int(block_size), nblocks, float(mean), float(se))

def block_average(data, block_sizes=None, n_blocks=None):
    '''Block averaging analysis of correlated data.

Divide the data set into contiguous blocks, average each block and treat the
block averages as independent samples to estimate the standard error of the
mean.  Repeating this for a range of block sizes shows how the standard error
estimate converges as the block size grows beyond the correlation length.

Parameters
----------
data : array_like
    1D sequence of (real) data points.
block_sizes : int or sequence of ints
    block sizes to evaluate.  See :func:`resolve_block_sizes`.
n_blocks : int or sequence of ints
    number of blocks to evaluate; ignored if ``block_sizes`` is given.  See
    :func:`resolve_block_sizes`.

Returns
-------
block_info : tuple of :class:`BlockStats`
    Statistics for each block size, in ascending order of block size.  Each
    tuple contains:

        block_size : int
            number of data points per block.
        num_blocks : int
            number of blocks, ``len(data) // block_size``.
        mean : float
            mean of the block means.
        se : float
            estimate of the standard error, or NaN if ``num_blocks`` is 1.

Raises
------
InvalidArgument
    if ``data`` is not a non-empty 1D sequence of numbers or the block sizes
    or counts are invalid.

Warns
-----
UndefinedStatistic
    if the standard error is undefined for one or more block sizes.
'''
    data = _as_data(data)
    sizes = resolve_block_sizes(len(data), block_sizes, n_blocks)
    block_info = tuple(block_stats(data, size) for size in sizes)

    undefined = [stat.block_size for stat in block_info if stat.num_blocks == 1]
    if undefined:
        warnings.warn('standard error undefined for a single block; set to NaN '
                      'for block size(s): %s'
                      % (', '.join(str(size) for size in undefined),),
                      UndefinedStatistic, stacklevel=2)

    return block_info
