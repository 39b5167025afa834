"""
Pytest fixtures for RCM Analyzer tests.
"""
import os
import sys
import pytest
import tempfile

# Add the project root to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rcm_analyzer import create_app
from rcm_analyzer.storage import InMemoryStore
from rcm_analyzer.services.failure_mode_service import FailureModeRepository
from rcm_analyzer.services.reliability_service import work_order_from_dict


@pytest.fixture
def store():
    """An empty in-memory key-value store."""
    return InMemoryStore()


@pytest.fixture
def repository(store):
    """A repository over the shipped defaults and an empty overlay."""
    return FailureModeRepository(store)


@pytest.fixture
def app(store):
    """Create and configure a test application instance."""
    flask_app = create_app('testing', store=store)
    flask_app.config.update({
        'TESTING': True,
    })
    yield flask_app


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    return app.test_client()


@pytest.fixture
def sqlite_uri():
    """A temporary SQLite database file."""
    db_fd, db_path = tempfile.mkstemp(suffix='.db')

    yield f'sqlite:///{db_path}'

    # Cleanup
    os.close(db_fd)
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sample_failure_mode():
    """Sample custom failure mode in wire format."""
    return {
        'id': 'FM-1700000000000',
        'equipmentType': 'Motor Eléctrico',
        'description': 'Desbalance del rotor',
        'causes': ['Acumulación de suciedad', 'Pérdida de contrapesos'],
        'effects': ['Vibración excesiva', 'Desgaste de rodamientos'],
        'detectionMethods': ['Análisis de vibración'],
        'preventiveActions': ['Balanceo dinámico'],
        'frequency': 'Low',
        'severity': 'Critical',
        'detectability': 'Medium'
    }


@pytest.fixture
def sample_work_orders():
    """Work-order history for two pieces of equipment, deliberately out of order."""
    raw = [
        {'id': 'WO-3', 'equipmentId': 'EQ-001', 'type': 'Corrective', 'status': 'Completed',
         'createdDate': '2024-01-03T00:00:00', 'completedDate': '2024-01-03T04:00:00', 'cost': 300.0},
        {'id': 'WO-1', 'equipmentId': 'EQ-001', 'type': 'Corrective', 'status': 'Completed',
         'createdDate': '2024-01-01T00:00:00', 'completedDate': '2024-01-01T02:00:00', 'cost': 100.0},
        {'id': 'WO-2', 'equipmentId': 'EQ-001', 'type': 'Preventive', 'status': 'Completed',
         'createdDate': '2024-01-02T00:00:00', 'completedDate': '2024-01-02T06:00:00', 'cost': 50.0},
        {'id': 'WO-4', 'equipmentId': 'EQ-001', 'type': 'Corrective', 'status': 'Open',
         'createdDate': '2024-01-04T00:00:00', 'cost': 0.0},
        {'id': 'WO-5', 'equipmentId': 'EQ-002', 'type': 'Emergency', 'status': 'Completed',
         'createdDate': '2024-01-05T00:00:00', 'completedDate': '2024-01-05T10:00:00', 'cost': 1000.0},
    ]
    return raw


@pytest.fixture
def work_orders(sample_work_orders):
    return [work_order_from_dict(wo) for wo in sample_work_orders]
