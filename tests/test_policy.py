import math
import pytest
from datetime import timedelta

from alert_worker.policy import ThresholdPolicy, hours_since, hours_until, whole_hours
from tests.helpers import NOW


@pytest.mark.parametrize("delta, expected", [
    (timedelta(hours=20), 20),
    (timedelta(hours=23, minutes=59), 23),
    (timedelta(hours=-36, minutes=-59), -36),
    (timedelta(hours=-37), -37),
    (timedelta(seconds=-1), 0),
    (timedelta(0), 0),
])
def test_whole_hours_truncates_toward_zero(delta, expected):
    assert whole_hours(delta) == expected

def test_hours_since_never_notified_is_infinite():
    assert hours_since(None, NOW) == math.inf
    assert hours_since(NOW - timedelta(hours=5), NOW) == 5

def test_hours_until_is_negative_when_overdue():
    assert hours_until(NOW - timedelta(hours=40), NOW) == -40

def test_scenario_a_inside_last_window_never_notified(policy):
    decision = policy.evaluate(NOW, NOW + timedelta(hours=20), None)
    assert decision.notify is True
    assert decision.expire is False
    assert decision.remaining_hours == 20

def test_scenario_b_outside_last_window_never_notified(policy):
    decision = policy.evaluate(NOW, NOW + timedelta(hours=50), None)
    assert decision.notify is False
    assert decision.expire is False

def test_scenario_b_legacy_predicate_notifies_immediately():
    legacy = ThresholdPolicy(72, 24, 36, legacy_predicate=True)
    assert legacy.evaluate(NOW, NOW + timedelta(hours=50), None).notify is True

def test_scenario_c_expired(policy):
    decision = policy.evaluate(NOW, NOW - timedelta(hours=40), None)
    assert decision.expire is True
    # No final reminder for an expired alert
    assert decision.notify is False

def test_expiry_boundary(policy):
    assert policy.evaluate(NOW, NOW - timedelta(hours=37), None).expire is True
    assert policy.evaluate(NOW, NOW - timedelta(hours=36), None).expire is False
    assert policy.evaluate(NOW, NOW - timedelta(hours=36, minutes=59), None).expire is False

def test_last_window_boundary(policy):
    assert policy.evaluate(NOW, NOW + timedelta(hours=24), None).notify is False
    assert policy.evaluate(NOW, NOW + timedelta(hours=23, minutes=59), None).notify is True

def test_just_notified_is_not_due_again(policy):
    decision = policy.evaluate(NOW, NOW + timedelta(hours=20), NOW)
    assert decision.notify is False
    assert decision.hours_since_last == 0

@pytest.mark.parametrize("since_last, expected", [
    (23, False),
    (24, False),
    (25, True),
    (80, True),
])
def test_repeat_notification_after_window(policy, since_last, expected):
    last = NOW - timedelta(hours=since_last)
    assert policy.evaluate(NOW, NOW + timedelta(hours=5), last).notify is expected

def test_repeat_uses_smaller_window_when_thresholds_swapped():
    swapped = ThresholdPolicy(first_reminder_hours=12, last_reminder_hours=24)
    last = NOW - timedelta(hours=13)
    assert swapped.evaluate(NOW, NOW + timedelta(hours=5), last).notify is True

def test_notification_in_future_is_not_due(policy):
    decision = policy.evaluate(NOW, NOW + timedelta(hours=5), NOW + timedelta(hours=30))
    assert decision.notify is False

def test_negative_windows_rejected():
    with pytest.raises(ValueError):
        ThresholdPolicy(first_reminder_hours=-1)

def test_from_config():
    class Cfg:
        ALERT_FIRST_REMINDER = 48
        ALERT_LAST_REMINDER = 12
        ALERT_EXPIRY_GRACE = 10
        ALERT_LEGACY_PREDICATE = True

    policy = ThresholdPolicy.from_config(Cfg)
    assert policy == ThresholdPolicy(48, 12, 10, True)
