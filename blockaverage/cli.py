'''Run a block averaging analysis on a column of data in a text file.

The file contains whitespace-separated columns of numbers (e.g. a time series
written out by a simulation); lines starting with '#' are ignored.  The
standard error is estimated for a range of block sizes and printed as a table.'''

# copyright: (c) 2014 James Spencer
# license: modified BSD license; see LICENSE for further details.

import argparse
import shutil
import sys
import warnings

import pandas as pd

import blockaverage

def read_data(filename, column=0, skip=0):
    '''Read a single column of data from a text file.

Parameters
----------
filename : string
    name of the file to read.  If '-', read from STDIN.
column : int
    index (starting from 0) of the column to extract.
skip : int
    number of initial data points to discard (e.g. equilibration period).

Returns
-------
data : :class:`pandas.Series`
    the requested data.
'''
    if filename == '-':
        filename = sys.stdin
    table = pd.read_csv(filename, sep=r'\s+', header=None, comment='#')
    if not 0 <= column < table.shape[1]:
        raise ValueError('column %i not present in %s: found %i column(s).'
                         % (column, getattr(filename, 'name', filename),
                            table.shape[1]))
    return table.iloc[skip:, column]

def run_block_average(filename, column=0, skip=0, block_sizes=None,
                      n_blocks=None, plotfile=None, width=0,
                      out_method='to_string'):
    '''Run a block averaging analysis on a data file and print to STDOUT.

See :func:`blockaverage.pd_utils.block_average` and
:func:`blockaverage.blocking.block_average` for details on the block averaging
procedure.

Parameters
----------
filename : string
    name of the file containing the data.  If '-', read from STDIN.
column : int
    column of the file to analyse.
skip : int
    number of initial data points to discard.
block_sizes : list of ints
    block sizes to evaluate.  Takes priority over ``n_blocks``.
n_blocks : list of ints
    numbers of blocks to evaluate.
plotfile : string
    Filename to which the plot of standard error against block size is saved.
    The plot is not created if None and shown interactively if '-'.
width : int
    Maximum width (in characters) of lines to print out for
    :class:`pandas.DataFrame` objects; exceeding this results in line wrapping.
    A non-positive value corresponds to disabling line wrapping.
out_method : string
    Output method for printing out tables.  Either 'to_string' to print a
    space-separated table or 'to_csv' to print a CSV table.

Returns
-------
block_info : :class:`pandas.DataFrame`
    Output from :func:`blockaverage.pd_utils.block_average`.
'''

    if width <= 0:
        width = None

    data = read_data(filename, column, skip)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always', blockaverage.blocking.UndefinedStatistic)
        block_info = blockaverage.pd_utils.block_average(data, block_sizes,
                                                         n_blocks)

    if out_method == 'to_csv':
        print(block_info.to_csv(float_format='%-.8e', na_rep='n/a'), end='')
    else:
        print(block_info.to_string(float_format='{0:-#.8e}'.format,
                                   na_rep='n/a', line_width=width))

    for warning in caught:
        print('WARNING: %s.' % (warning.message,), file=sys.stderr)

    if plotfile:
        blockaverage.plot.plot_block_average(block_info, plotfile)

    return block_info

def parse_args(args):
    '''Parse command-line arguments.

Parameters
----------
args : list of strings
    command-line arguments.

Returns
-------
options : :class:`argparse.Namespace`
    parsed options; see ``block_average --help``.
'''

    cols = shutil.get_terminal_size()[0]
    if not sys.stdout.isatty():
        cols = -1

    parser = argparse.ArgumentParser(description = __doc__)
    parser.add_argument('-b', '--block-sizes', type=int, nargs='+',
                        default=None, help='Block sizes to evaluate.  Takes '
                        'priority over --n-blocks.  Default: block sizes '
                        'obtained from --n-blocks.')
    parser.add_argument('-c', '--column', type=int, default=0,
                        help='Column (counting from 0) of the file to analyse.  '
                        'Default: %(default)s.')
    parser.add_argument('-n', '--n-blocks', type=int, nargs='+', default=None,
                        help='Numbers of blocks to split the data into.  '
                        'Default: 5 up to the number of data points.')
    parser.add_argument('-o', '--output', default='txt', choices=['txt', 'csv'],
                        help='Format for data table.  Default: %(default)s.')
    parser.add_argument('-p', '--plot', default=None, dest='plotfile',
                        help='Filename to which the plot of standard error '
                        'against block size is saved.  Use \'-\' to show plot '
                        'interactively.  Default: off.')
    parser.add_argument('-s', '--skip', type=int, default=0,
                        help='Number of initial data points to discard.  '
                        'Default: %(default)s.')
    parser.add_argument('-w', '--width', type=int, default=cols,
                        help='Width (in characters) of data to print out '
                        'before wrapping them.  A non-positive value disables '
                        'wrapping.  Default: current terminal width if printing '
                        'to a terminal, -1 if redirecting.')
    parser.add_argument('filename', help='File containing the data to analyse.  '
                        'Use \'-\' to read from STDIN.')

    options = parser.parse_args(args)

    if options.skip < 0:
        parser.error('--skip must be non-negative')
    if options.column < 0:
        parser.error('--column must be non-negative')

    out_methods = {'txt': 'to_string', 'csv': 'to_csv'}
    options.output = out_methods[options.output]

    return options

def main(args=None):
    '''Run block averaging analysis on a data file.

Parameters
----------
args : list of strings
    command-line arguments.  Default: ``sys.argv[1:]``.

Returns
-------
status : int
    0 on success, 1 if the data or options could not be used.
'''

    if args is None:
        args = sys.argv[1:]
    options = parse_args(args)
    try:
        run_block_average(options.filename, options.column, options.skip,
                          options.block_sizes, options.n_blocks,
                          options.plotfile, options.width, options.output)
    except (ValueError, OSError) as err:
        # InvalidArgument and pandas parsing errors are both ValueErrors.
        print('ERROR: %s' % (err,), file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':

    sys.exit(main(sys.argv[1:]))
