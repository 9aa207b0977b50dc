import pytest
from prometheus_client import REGISTRY

from playground.core.capabilities import CapabilityError
from playground.core.messaging import public_send, send
from playground.core.observability.metrics import REFUSED_MESSAGE_LABEL


class User:
    def __init__(self, name):
        self._name = name

    def name(self):
        return self._name

    def greet(self, greeting, punct="!"):
        return f"{greeting}, {self._name}{punct}"

    def _secret(self):
        return "hunter2"


def _dispatched(receiver, message, outcome):
    v = REGISTRY.get_sample_value(
        "playground_messages_dispatched_total",
        {"receiver": receiver, "message": message, "outcome": outcome},
    )
    return v or 0.0


def test_send_calls_method_named_by_variable():
    message = "name"
    assert send(User("ada"), message) == "ada"


def test_send_passes_arguments():
    assert send(User("ada"), "greet", "Hello", punct="?") == "Hello, ada?"


def test_send_reaches_private_methods():
    assert send(User("ada"), "_secret") == "hunter2"


def test_public_send_refuses_private_methods():
    with pytest.raises(CapabilityError, match="private"):
        public_send(User("ada"), "_secret")


def test_public_send_calls_public_methods():
    assert public_send(User("ada"), "name") == "ada"


@pytest.mark.parametrize("fn", [send, public_send])
def test_unknown_message_raises_capability_error(fn):
    with pytest.raises(CapabilityError) as ei:
        fn(User("ada"), "fly")
    assert ei.value.receiver_type == "User"
    assert ei.value.message == "fly"


def test_dispatch_is_counted():
    before_ok = _dispatched("User", "name", "ok")
    before_refused = _dispatched("User", REFUSED_MESSAGE_LABEL, "refused")

    public_send(User("ada"), "name")
    with pytest.raises(CapabilityError):
        public_send(User("ada"), "fly")

    assert _dispatched("User", "name", "ok") == before_ok + 1
    assert _dispatched("User", REFUSED_MESSAGE_LABEL, "refused") == before_refused + 1
    assert _dispatched("User", "fly", "refused") == 0.0


def _refused_series():
    return {
        s.labels["message"]
        for metric in REGISTRY.collect()
        if metric.name == "playground_messages_dispatched"
        for s in metric.samples
        if s.name.endswith("_total") and s.labels.get("outcome") == "refused"
    }


def test_refused_names_do_not_create_new_series():
    for i in range(20):
        with pytest.raises(CapabilityError):
            public_send(User("ada"), f"unknown_{i}")
        with pytest.raises(CapabilityError):
            public_send(User("ada"), f"_private_{i}")

    series = _refused_series()
    assert REFUSED_MESSAGE_LABEL in series
    assert not any(m.startswith(("unknown_", "_private_")) for m in series)


@pytest.mark.parametrize("message", [5, None, ""])
def test_non_string_message_is_refused(message):
    with pytest.raises(CapabilityError):
        public_send(User("ada"), message)
