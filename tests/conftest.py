"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from app.main import app


# Block as it appears under "show running-config"
SAMPLE_ACL_BLOCK = """ip access-list standard MGMT
   10 permit host 10.1.1.1
   20 permit 10.10.10.0 255.255.255.0 log
   30 permit 172.16.0.0/12
   40 deny any log
"""

SAMPLE_RUNNING_CONFIG = """! device: leaf1 (vEOS, EOS-4.20.1F)
!
hostname leaf1
!
ip access-list standard MGMT
   10 permit host 10.1.1.1
   20 permit 10.10.10.0 255.255.255.0 log
!
ip access-list standard SNMP
   10 deny 192.168.0.0/16
   20 permit any
!
ip access-list EXT-WEB
   10 permit tcp any any eq www
!
interface Ethernet1
   ip access-group MGMT in
!
end
"""


@pytest.fixture(scope="function", autouse=True)
def fail_on_malformed_lines():
    """Run every test with the default fail-the-parse policy."""
    with patch("app.core.config.settings.ACL_SKIP_MALFORMED_LINES", False):
        yield


@pytest.fixture(scope="function")
def client():
    """Create a test client for the API."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def acl_block():
    return SAMPLE_ACL_BLOCK


@pytest.fixture
def running_config():
    return SAMPLE_RUNNING_CONFIG
