"""
Tests for the clustering plots
"""

import unittest
import tempfile
import shutil
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from clustering.visualization import ClusteringVisualizer


class TestClusteringVisualizer(unittest.TestCase):
    """Test convergence and cluster size plots"""

    def setUp(self):
        """Create temporary directory for figures"""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.visualizer = ClusteringVisualizer()

    def tearDown(self):
        """Close figures and clean up temporary directory"""
        plt.close('all')
        shutil.rmtree(self.temp_dir)

    def test_convergence_with_package_reference(self):
        """Test that the package layout MQ is drawn as a labelled line"""
        ax = self.visualizer.plot_convergence([(10000, 1.2), (20000, 1.5)], reference_fitness=0.8)
        labels = [line.get_label() for line in ax.get_lines()]

        self.assertIn('best MQ', labels)
        self.assertIn('package MQ', labels)

    def test_convergence_without_reference(self):
        """Test the plot without a reference line"""
        ax = self.visualizer.plot_convergence([(10000, 1.2)])
        labels = [line.get_label() for line in ax.get_lines()]

        self.assertNotIn('package MQ', labels)

    def test_summary_saved(self):
        """Test saving the side-by-side summary"""
        path = self.temp_dir / "summary.png"
        self.visualizer.plot_search_summary(
            [(10000, 1.2)], {0: 3, 1: 2}, (2, 3),
            save_path=str(path), reference_fitness=0.5
        )

        self.assertTrue(path.exists())


if __name__ == '__main__':
    unittest.main()
