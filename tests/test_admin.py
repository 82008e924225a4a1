"""Tests for the stream code admin."""

from unittest import mock

import pytest
from django.contrib.admin.sites import AdminSite

from stream_codes.admin import StreamCodeAdmin
from stream_codes.models import StreamCode

pytestmark = pytest.mark.django_db


@pytest.fixture
def model_admin():
    return StreamCodeAdmin(StreamCode, AdminSite())


def test_kind_column(model_admin, multi_descriptor):
    record = StreamCode.objects.create(code="MULT", stream_data=multi_descriptor)
    assert model_admin.kind(record) == "multi"


def test_deactivate_keeps_descriptor(model_admin, registry, single_descriptor, rf):
    code = registry.issue(single_descriptor)

    with mock.patch.object(model_admin, "message_user") as message_user:
        model_admin.deactivate(rf.post("/admin/"), StreamCode.objects.filter(code=code))

    record = StreamCode.objects.get(code=code)
    assert record.is_active is False
    assert record.stream_data == single_descriptor
    assert registry.resolve(code) is None
    message_user.assert_called_once()
