'''blockaverage is a python module for block averaging analysis of correlated data.

.. toctree::
   :maxdepth: 1
   :glob:

   blockaverage.*

:mod:`blockaverage.blocking` implements the block averaging method [1]_, [2]_
for estimating the standard error of the mean of a serially correlated data set
(e.g. a time series) contained within a :mod:`numpy` array, for a range of
block sizes.  The standard error estimate grows with the block size until the
blocks are longer than the correlation length, where it levels off.
:mod:`blockaverage.pd_utils` provides a wrapper around this using
:mod:`pandas`, and :mod:`blockaverage.plot` plots the standard error against
the block size.

:mod:`blockaverage.cli` contains the ``block_average`` command-line script.

References
----------
.. [1]  "Error estimates on averages of correlated data", H. Flyvbjerg and
   H.G. Petersen, J. Chem. Phys. 91, 461 (1989).
.. [2]  "Computer Simulation of Liquids", M. P. Allen and D. J. Tildesley,
   Oxford University Press (1987), section 6.4.
'''

# copyright: (c) 2014 James Spencer
# license: modified BSD license; see LICENSE for further details.

import warnings
# For convenience, import all submodules so the user need only import
# blockaverage.
import blockaverage.blocking
import blockaverage.pd_utils
try:
    import blockaverage.plot
except ImportError:
    warnings.warn('Plotting disabled: matplotlib not available.')
