import fractions
import numpy
import unittest
import warnings

import blockaverage
import blockaverage.tests.base as tests_base

InvalidArgument = blockaverage.blocking.InvalidArgument
UndefinedStatistic = blockaverage.blocking.UndefinedStatistic

class ResolveTests(unittest.TestCase):
    def test_default(self):
        # n_blocks = 5..10 -> block sizes 2, 1, 1, 1, 1, 1
        sizes = blockaverage.blocking.resolve_block_sizes(10)
        numpy.testing.assert_array_equal(sizes, [1, 2])
    def test_default_long(self):
        sizes = blockaverage.blocking.resolve_block_sizes(20)
        numpy.testing.assert_array_equal(sizes, [1, 2, 3, 4])
    def test_default_short(self):
        for ndata in (1, 2, 4):
            sizes = blockaverage.blocking.resolve_block_sizes(ndata)
            numpy.testing.assert_array_equal(sizes, [1])
    def test_n_blocks(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, n_blocks=[5, 2, 3, 5])
        numpy.testing.assert_array_equal(sizes, [2, 3, 5])
    def test_n_blocks_scalar(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, n_blocks=4)
        numpy.testing.assert_array_equal(sizes, [2])
    def test_block_sizes(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, block_sizes=[4, 2, 2, 10])
        numpy.testing.assert_array_equal(sizes, [2, 4, 10])
    def test_block_sizes_set(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, block_sizes={3, 1})
        numpy.testing.assert_array_equal(sizes, [1, 3])
    def test_block_sizes_float(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, block_sizes=[3.0, numpy.int64(5)])
        numpy.testing.assert_array_equal(sizes, [3, 5])
        self.assertTrue(numpy.issubdtype(sizes.dtype, numpy.integer))
    def test_block_sizes_priority(self):
        # n_blocks is ignored (and hence not validated) if block_sizes is given.
        sizes = blockaverage.blocking.resolve_block_sizes(10, block_sizes=[3], n_blocks=[0, 20])
        numpy.testing.assert_array_equal(sizes, [3])
    def test_block_sizes_fraction(self):
        sizes = blockaverage.blocking.resolve_block_sizes(10, block_sizes=[fractions.Fraction(3, 1)])
        numpy.testing.assert_array_equal(sizes, [3])
    def test_block_sizes_huge(self):
        for huge in (10**30, 10**400):
            with self.assertRaises(InvalidArgument) as context:
                blockaverage.blocking.resolve_block_sizes(10, block_sizes=[huge])
            self.assertIn('block_sizes', str(context.exception))
    def test_invalid_block_sizes(self):
        for bad in ([0], [11], [-2], [2, 11], ['a'], 'a', [2.5], [], [True],
                    [float('nan')], [float('inf')], [None], [10**30],
                    [fractions.Fraction(5, 2)]):
            with self.assertRaises(InvalidArgument) as context:
                blockaverage.blocking.resolve_block_sizes(10, block_sizes=bad)
            self.assertIn('block_sizes', str(context.exception))
    def test_invalid_n_blocks(self):
        for bad in ([0], [11], [-1], ['3'], [1.5], []):
            with self.assertRaises(InvalidArgument) as context:
                blockaverage.blocking.resolve_block_sizes(10, n_blocks=bad)
            self.assertIn('n_blocks', str(context.exception))
    def test_value_error(self):
        with self.assertRaises(ValueError):
            blockaverage.blocking.resolve_block_sizes(10, block_sizes=[0])

class BlockMeansTests(unittest.TestCase):
    def setUp(self):
        self.data = tests_base.data_10
    def tearDown(self):
        del self.data
    def test_exact(self):
        means = blockaverage.blocking.block_means(self.data, 2)
        numpy.testing.assert_array_almost_equal(means, tests_base.block_means_10[2])
    def test_remainder(self):
        means = blockaverage.blocking.block_means(self.data, 3)
        numpy.testing.assert_array_almost_equal(means, tests_base.block_means_10[3])
    def test_remainder_single(self):
        # 10 // 6 = 1: a single block containing all data.
        means = blockaverage.blocking.block_means(self.data, 6)
        numpy.testing.assert_array_almost_equal(means, [5.5])
    def test_unit(self):
        means = blockaverage.blocking.block_means(self.data, 1)
        numpy.testing.assert_array_almost_equal(means, self.data)

class BlockAverageTests(unittest.TestCase):
    def setUp(self):
        self.data = tests_base.data_10
    def tearDown(self):
        del self.data
    def test_block_size_2(self):
        (stat,) = blockaverage.blocking.block_average(self.data, block_sizes=[2])
        self.assertEqual(stat.block_size, 2)
        self.assertEqual(stat.num_blocks, 5)
        self.assertAlmostEqual(stat.mean, 5.5)
        self.assertAlmostEqual(stat.se, numpy.sqrt(8)/2)
    def test_block_size_3(self):
        (stat,) = blockaverage.blocking.block_average(self.data, block_sizes=3)
        means = tests_base.block_means_10[3]
        se = numpy.sqrt(((means - means.mean())**2).sum()/(3*2))
        self.assertEqual(stat.num_blocks, 3)
        self.assertAlmostEqual(stat.mean, 15.5/3)
        self.assertAlmostEqual(stat.se, se)
    def test_unit_block(self):
        # For one point per block this is the usual standard error of the mean.
        data = tests_base.data_corr
        (stat,) = blockaverage.blocking.block_average(data, block_sizes=[1])
        self.assertAlmostEqual(stat.mean, data.mean())
        self.assertAlmostEqual(stat.se, data.std(ddof=1)/numpy.sqrt(len(data)))
    def test_single_block(self):
        with self.assertWarns(UndefinedStatistic):
            stats = blockaverage.blocking.block_average(self.data, block_sizes=[2, 6, 10])
        self.assertEqual([stat.num_blocks for stat in stats], [5, 1, 1])
        self.assertFalse(numpy.isnan(stats[0].se))
        for stat in stats[1:]:
            self.assertTrue(numpy.isnan(stat.se))
            self.assertAlmostEqual(stat.mean, 5.5)
    def test_single_block_error(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error', UndefinedStatistic)
            with self.assertRaises(UndefinedStatistic):
                blockaverage.blocking.block_average(self.data, block_sizes=[10])
    def test_single_point(self):
        with self.assertWarns(UndefinedStatistic):
            stats = blockaverage.blocking.block_average([4.0])
        self.assertEqual(len(stats), 1)
        self.assertEqual(stats[0].block_size, 1)
        self.assertEqual(stats[0].num_blocks, 1)
        self.assertEqual(stats[0].mean, 4.0)
        self.assertTrue(numpy.isnan(stats[0].se))
    def test_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error', UndefinedStatistic)
            blockaverage.blocking.block_average(tests_base.data_corr)
    def test_constant(self):
        data = numpy.full(50, 2.5)
        stats = blockaverage.blocking.block_average(data, n_blocks=range(2, 51))
        for stat in stats:
            self.assertAlmostEqual(stat.mean, 2.5)
            self.assertAlmostEqual(stat.se, 0.0)
    def test_list_input(self):
        stats = blockaverage.blocking.block_average(list(range(1, 11)), block_sizes=[2])
        self.assertAlmostEqual(stats[0].se, numpy.sqrt(2))
    def test_invalid_data(self):
        for bad in ([], [[1.0, 2.0], [3.0, 4.0]], ['a', 'b'], ['1', '2', '3'],
                    [1.0, None], 3.0):
            with self.assertRaises(InvalidArgument) as context:
                blockaverage.blocking.block_average(bad)
            self.assertIn('data', str(context.exception))

class BlockAverageTableTests(unittest.TestCase):
    def setUp(self):
        self.data = tests_base.data_corr
        self.stats = blockaverage.blocking.block_average(self.data)
    def tearDown(self):
        del self.data
        del self.stats
    def test_immutable(self):
        self.assertIsInstance(self.stats, tuple)
        with self.assertRaises(AttributeError):
            self.stats[0].se = 0.0
    def test_num_blocks(self):
        ndata = len(self.data)
        for stat in self.stats:
            self.assertTrue(1 <= stat.block_size <= ndata)
            self.assertEqual(stat.num_blocks, ndata // stat.block_size)
            self.assertGreaterEqual(stat.num_blocks, 5)
    def test_order(self):
        sizes = [stat.block_size for stat in self.stats]
        self.assertEqual(sizes, sorted(set(sizes)))
    def test_default_sizes(self):
        ndata = len(self.data)
        sizes = [stat.block_size for stat in self.stats]
        expected = sorted(set(ndata // n for n in range(5, ndata+1)))
        self.assertEqual(sizes, expected)
    def test_mean_exact_blocks(self):
        # Mean of block means is the overall mean when blocks are equal sized.
        for stat in self.stats:
            if len(self.data) % stat.block_size == 0:
                self.assertAlmostEqual(stat.mean, self.data.mean())

def main():
    unittest.main()

if __name__ == '__main__':

    main()
