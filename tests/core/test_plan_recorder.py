from __future__ import annotations

import logging

from helpers.fake_manager import FakeManager
from uspin.core.package_manager import PackageManager, PlanRecorder


def test_plan_recorder_and_fake_satisfy_the_protocol():
    assert isinstance(PlanRecorder(), PackageManager)
    assert isinstance(FakeManager(), PackageManager)


def test_plan_recorder_records_calls_in_order(caplog):
    caplog.set_level(logging.INFO, logger="uspin")
    recorder = PlanRecorder()
    recorder.add_repo("Solus", "https://example.org/index.xz")
    recorder.install_groups(True, ("system.base",))
    recorder.install_packages(False, ["nano", "vim"])

    assert recorder.to_dict() == [
        {"call": "add_repo", "name": "Solus", "uri": "https://example.org/index.xz"},
        {"call": "install_groups", "ignore_safety": True, "names": ["system.base"]},
        {"call": "install_packages", "ignore_safety": False, "names": ["nano", "vim"]},
    ]
    assert "install-packages ignore_safety=False nano vim" in caplog.text
