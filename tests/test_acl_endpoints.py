"""
Tests for the ACL translation endpoints.
"""
from unittest.mock import patch

import pytest

from fastapi import status


ENTRY = {"seqno": "30", "action": "deny", "srcaddr": "192.168.1.0", "srcprefixlen": "24", "log": True}


def test_parse_block(client, acl_block):
    response = client.post("/api/v1/acls/parse", json={"config": acl_block})

    assert response.status_code == status.HTTP_200_OK
    entries = response.json()["entries"]
    assert list(entries) == ["10", "20", "30", "40"]
    assert entries["20"] == {
        "seqno": "20",
        "action": "permit",
        "srcaddr": "10.10.10.0",
        "srcprefixlen": "24",
        "log": True,
    }


def test_parse_malformed_line_returns_422(client):
    response = client.post("/api/v1/acls/parse", json={"config": "10 permit any junk\n"})

    assert response.status_code == 422
    assert "junk" in response.json()["detail"]


def test_parse_invalid_mask_returns_422(client):
    response = client.post(
        "/api/v1/acls/parse", json={"config": "10 permit 10.0.0.0 255.255.255.1\n"}
    )

    assert response.status_code == 422
    assert "255.255.255.1" in response.json()["detail"]


def test_parse_rejects_oversized_config(client):
    with patch("app.core.config.settings.MAX_CONFIG_SIZE", 10):
        response = client.post("/api/v1/acls/parse", json={"config": "10 permit any\n" * 5})

    assert response.status_code == 413


def test_lookup(client, running_config):
    response = client.post("/api/v1/acls/lookup", json={"config": running_config, "name": "MGMT"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["name"] == "MGMT"
    assert list(data["entries"]) == ["10", "20"]


def test_lookup_missing_acl_returns_404(client, running_config):
    response = client.post("/api/v1/acls/lookup", json={"config": running_config, "name": "NOPE"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "NOPE" in response.json()["detail"]


def test_scan(client, running_config):
    response = client.post("/api/v1/acls/scan", json={"config": running_config})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 2
    assert sorted(data["acls"]) == ["MGMT", "SNMP"]
    assert data["acls"]["SNMP"]["20"]["srcaddr"] == "0.0.0.0"


def test_render(client):
    response = client.post("/api/v1/acls/render", json={"entry": ENTRY})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"command": "30 deny 192.168.1.0/24 log"}


def test_render_requires_action(client):
    response = client.post("/api/v1/acls/render", json={"entry": {"seqno": "10"}})
    assert response.status_code == 422


def test_add_commands(client):
    response = client.post("/api/v1/acls/TEST/commands/add", json={"entry": ENTRY})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "name": "TEST",
        "commands": ["ip access-list standard TEST", "30 deny 192.168.1.0/24 log", "exit"],
    }


def test_update_commands(client):
    response = client.post("/api/v1/acls/TEST/commands/update", json={"entry": ENTRY})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["commands"] == [
        "ip access-list standard TEST",
        "no 30",
        "30 deny 192.168.1.0/24 log",
        "exit",
    ]


def test_update_requires_seqno(client):
    entry = dict(ENTRY, seqno=None)
    response = client.post("/api/v1/acls/TEST/commands/update", json={"entry": entry})
    assert response.status_code == 422


def test_remove_commands(client):
    response = client.post("/api/v1/acls/TEST/commands/remove", json={"seqno": 30})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["commands"] == ["ip access-list standard TEST", "no 30", "exit"]


def test_remove_rejects_non_numeric_seqno(client):
    response = client.post("/api/v1/acls/TEST/commands/remove", json={"seqno": "abc"})
    assert response.status_code == 422


def test_lifecycle_commands(client):
    expected = {
        "create": ["ip access-list standard TEST"],
        "delete": ["no ip access-list standard TEST"],
        "default": ["default ip access-list standard TEST"],
    }
    for action, commands in expected.items():
        response = client.post(f"/api/v1/acls/TEST/commands/{action}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["commands"] == commands


def test_name_with_newline_is_rejected(client):
    response = client.post(
        "/api/v1/acls/A%0Ano%20ip%20access-list%20standard%20B/commands/create"
    )
    assert response.status_code == 422


@pytest.mark.parametrize("action", ["create", "delete", "default"])
def test_name_with_space_is_rejected(client, action):
    response = client.post(f"/api/v1/acls/A%20B/commands/{action}")
    assert response.status_code == 422


def test_entry_commands_reject_bad_name(client):
    response = client.post("/api/v1/acls/A%0Aexit/commands/add", json={"entry": ENTRY})
    assert response.status_code == 422

    response = client.post("/api/v1/acls/A%20B/commands/remove", json={"seqno": 10})
    assert response.status_code == 422


def test_lookup_rejects_bad_name(client, running_config):
    response = client.post(
        "/api/v1/acls/lookup", json={"config": running_config, "name": "MGMT\nno ip access-list standard SNMP"}
    )
    assert response.status_code == 422


@pytest.mark.parametrize("seqno", ["abc", "١٠", " "])
def test_update_requires_numeric_seqno(client, seqno):
    entry = dict(ENTRY, seqno=seqno)
    response = client.post("/api/v1/acls/TEST/commands/update", json={"entry": entry})
    assert response.status_code == 422


def test_remove_rejects_non_ascii_seqno(client):
    response = client.post("/api/v1/acls/TEST/commands/remove", json={"seqno": "١٠"})
    assert response.status_code == 422
