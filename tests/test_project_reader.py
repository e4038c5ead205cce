"""
Tests for the project model and the ODEM/CDA reader
"""

import unittest
import tempfile
from pathlib import Path

from clustering.cda_reader import read_project, read_project_from_string, CDAParseError
from clustering.project_model import (
    Project, ProjectClass, DependencyType, ElementType, ElementVisibility
)
from fixtures import SAMPLE_ODEM, two_pairs_project

SAMPLE_PROJECT_PATH = Path(__file__).parent.parent / "data" / "sample_project.odem"


class TestProjectModel(unittest.TestCase):
    """Test Project functionality"""

    def test_add_package_returns_existing(self):
        """Test that packages with the same name are merged"""
        project = Project("p")
        first = project.add_package("a")
        second = project.add_package("a")

        self.assertIs(first, second)
        self.assertEqual(project.get_package_count(), 1)

    def test_duplicate_class_rejected(self):
        """Test that a class name can only be added once"""
        project = Project("p")
        project.add_class(ProjectClass("A"))

        with self.assertRaises(ValueError):
            project.add_class(ProjectClass("A"))

    def test_class_index_in_declaration_order(self):
        """Test class lookup by name"""
        project = two_pairs_project()

        self.assertEqual(project.get_class_index("A"), 0)
        self.assertEqual(project.get_class_index("B"), 2)
        self.assertIsNone(project.get_class_index("java.lang.Object"))
        self.assertIsNone(project.get_class_by_name("java.lang.Object"))

    def test_dependency_edges_skip_external_and_self(self):
        """Test that only dependencies between project classes are edges"""
        project = Project("p")
        a = ProjectClass("A")
        b = ProjectClass("B")
        project.add_class(a)
        project.add_class(b)
        a.add_dependency("B")
        a.add_dependency("A")
        a.add_dependency("java.util.List")

        self.assertEqual(project.dependency_edges(), [(0, 1)])
        self.assertEqual(project.get_dependency_count(), 2)

    def test_package_assignment(self):
        """Test assignment of classes to their declared packages"""
        project = two_pairs_project()
        self.assertEqual(project.package_assignment(), [0, 0, 1, 1])

    def test_package_assignment_requires_packages(self):
        """Test that classes without a package cannot be assigned"""
        project = Project("p")
        project.add_class(ProjectClass("A"))

        with self.assertRaises(ValueError):
            project.package_assignment()


class TestCDAReader(unittest.TestCase):
    """Test reading dependency documents"""

    def test_read_from_string(self):
        """Test loading packages, classes and dependencies"""
        project = read_project_from_string(SAMPLE_ODEM)

        self.assertEqual(project.name, "shop")
        self.assertEqual(project.get_class_count(), 3)
        self.assertEqual(project.get_package_count(), 2)
        self.assertEqual(project.get_dependency_count(), 3)

        cart = project.get_class_by_name("shop.core.Cart")
        self.assertEqual(cart.package.name, "shop.core")
        self.assertTrue(cart.depends_on("shop.core.Item"))
        self.assertEqual(cart.dependencies[1].dependency_type, DependencyType.EXTENDS)

    def test_type_attributes(self):
        """Test classification, visibility and abstract flag"""
        project = read_project_from_string(SAMPLE_ODEM)
        item = project.get_class_by_name("shop.core.Item")
        page = project.get_class_by_name("shop.web.CartPage")

        self.assertEqual(item.element_type, ElementType.INTERFACE)
        self.assertEqual(item.visibility, ElementVisibility.PACKAGE)
        self.assertTrue(item.is_abstract)
        self.assertFalse(page.is_abstract)
        self.assertFalse(project.get_class_by_name("shop.core.Cart").is_abstract)

    def test_invalid_dependency_classification(self):
        """Test rejection of unknown dependency kinds"""
        content = SAMPLE_ODEM.replace('classification="implements"', 'classification="friend"')

        with self.assertRaises(CDAParseError):
            read_project_from_string(content)

    def test_invalid_visibility(self):
        """Test rejection of unknown visibilities"""
        content = SAMPLE_ODEM.replace('visibility="default"', 'visibility="internal"')

        with self.assertRaises(CDAParseError):
            read_project_from_string(content)

    def test_missing_context(self):
        """Test rejection of documents without a context"""
        with self.assertRaises(CDAParseError):
            read_project_from_string('<ODEM version="1"><header/></ODEM>')

    def test_invalid_xml(self):
        """Test rejection of malformed XML"""
        with self.assertRaises(CDAParseError):
            read_project_from_string("<ODEM><context name='x'>")

    def test_missing_file(self):
        """Test error for a missing document"""
        with self.assertRaises(CDAParseError):
            read_project("does/not/exist.odem")

    def test_read_from_file(self):
        """Test loading a document from disk"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "shop.odem"
            path.write_text(SAMPLE_ODEM)
            project = read_project(path)

        self.assertEqual(project.get_class_count(), 3)

    def test_bundled_sample_project(self):
        """Test the sample project shipped with the repository"""
        project = read_project(SAMPLE_PROJECT_PATH)

        self.assertEqual(project.get_class_count(), 9)
        self.assertEqual(project.get_package_count(), 3)
        self.assertEqual(project.get_dependency_count(), 12)


if __name__ == '__main__':
    unittest.main()
