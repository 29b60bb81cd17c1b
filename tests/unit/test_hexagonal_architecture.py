"""Test that the hexagonal architecture is properly enforced.

Dependency flow:
- Domain has no dependencies on other layers
- Ports depend only on Domain
- Application depends only on Domain and Ports
- Infrastructure depends on Domain and Ports
"""

import ast
from pathlib import Path

PACKAGE = "echo_deployments"
BASE_PATH = Path(__file__).parent.parent.parent / PACKAGE


def extract_imports(file_path: Path) -> set[str]:
    """Extract absolute module names imported by a Python file."""
    tree = ast.parse(file_path.read_text())
    package_parts = [PACKAGE, *file_path.parent.relative_to(BASE_PATH).parts]

    imports = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                anchor = package_parts[: len(package_parts) - node.level + 1]
                module = ".".join([*anchor, node.module] if node.module else anchor)
                imports.add(module)
            elif node.module:
                imports.add(node.module)

    return imports


def check_layer_dependencies(layer: str, forbidden_layers: list[str]) -> list[str]:
    """Check if a layer has any forbidden dependencies."""
    violations = []

    for py_file in (BASE_PATH / layer).rglob("*.py"):
        for imp in extract_imports(py_file):
            parts = imp.split(".")
            if parts[0] == PACKAGE and len(parts) >= 2 and parts[1] in forbidden_layers:
                rel_path = py_file.relative_to(BASE_PATH)
                violations.append(f"{rel_path} imports from {parts[1]} layer: {imp}")

    return violations


class TestHexagonalArchitecture:
    """Test suite for hexagonal architecture compliance."""

    def test_relative_imports_are_resolved(self):
        """Relative imports must resolve to absolute package modules."""
        imports = extract_imports(BASE_PATH / "application" / "service_group.py")

        assert "echo_deployments.ports.target" in imports
        assert "echo_deployments.domain.value_objects" in imports

    def test_domain_has_no_external_dependencies(self):
        """Domain layer should not depend on any other layers."""
        violations = check_layer_dependencies(
            "domain", forbidden_layers=["application", "infrastructure", "ports"]
        )

        assert not violations, "Domain layer has forbidden dependencies:\n" + "\n".join(violations)

    def test_ports_depend_only_on_domain(self):
        """Ports layer should only depend on domain layer."""
        violations = check_layer_dependencies(
            "ports", forbidden_layers=["application", "infrastructure"]
        )

        assert not violations, "Ports layer has forbidden dependencies:\n" + "\n".join(violations)

    def test_application_does_not_depend_on_infrastructure(self):
        """Application layer should not depend on infrastructure layer."""
        violations = check_layer_dependencies("application", forbidden_layers=["infrastructure"])

        assert not violations, (
            "Application layer has forbidden infrastructure dependencies:\n" + "\n".join(violations)
        )

    def test_infrastructure_does_not_depend_on_application(self):
        """Infrastructure implements ports and must not reach into application."""
        violations = check_layer_dependencies("infrastructure", forbidden_layers=["application"])

        assert not violations, (
            "Infrastructure layer has forbidden dependencies:\n" + "\n".join(violations)
        )
