import io

import pytest

from notification_patterns.notifiers import EmailNotifier, PushNotifier, SMSNotifier
from notification_patterns.sinks import ConsoleSink
from notification_patterns.template_renderer import TemplateRenderer


@pytest.mark.parametrize(
    "notifier_class, destination, expected",
    [
        (EmailNotifier, "acetina@example.com", "Sending email with message: acetina@example.com, Hello!"),
        (SMSNotifier, "+1234567890", "Sending SMS with message: +1234567890, Hello!"),
        (PushNotifier, "device123", "Sending push notification with message: device123, Hello!"),
    ],
)
def test_send_writes_one_formatted_line(sink, notifier_class, destination, expected) -> None:
    notifier = notifier_class(destination, sink=sink)

    assert notifier.send("Hello!") is True
    assert sink.lines == [expected]


def test_renderer_output_matches_builtin_format(sink) -> None:
    renderer = TemplateRenderer()
    with_templates = SMSNotifier("+1987654321", sink=sink, renderer=renderer)
    plain = SMSNotifier("+1987654321")

    with_templates.send("System Alert via SMS!")

    assert sink.lines == [plain.format_line("System Alert via SMS!")]


def test_failed_render_falls_back_to_builtin_format(sink, caplog) -> None:
    class BrokenRenderer:
        def render(self, channel, context):
            return None

    notifier = PushNotifier("device456", sink=sink, renderer=BrokenRenderer())
    notifier.send("ping")

    assert sink.lines == ["Sending push notification with message: device456, ping"]
    assert any("using fallback" in r.getMessage() for r in caplog.records)


def test_default_sink_prints_to_stdout(capsys) -> None:
    EmailNotifier("usuario@example.com").send("Hello via Email!")

    out = capsys.readouterr().out
    assert out == "Sending email with message: usuario@example.com, Hello via Email!\n"


def test_console_sink_uses_given_stream() -> None:
    stream = io.StringIO()
    EmailNotifier("a@example.com", sink=ConsoleSink(stream)).send("hi")

    assert stream.getvalue() == "Sending email with message: a@example.com, hi\n"


def test_variant_specific_destination_names() -> None:
    assert EmailNotifier("a@example.com").recipient == "a@example.com"
    assert SMSNotifier("+48123").phone_number == "+48123"
    assert PushNotifier("dev-1").device_id == "dev-1"


def test_destination_is_read_only() -> None:
    notifier = EmailNotifier("a@example.com")
    with pytest.raises(AttributeError):
        notifier.destination = "b@example.com"


def test_value_equality() -> None:
    assert EmailNotifier("a@example.com") == EmailNotifier("a@example.com")
    assert EmailNotifier("a@example.com") != EmailNotifier("b@example.com")
    # Same destination, different variant
    assert SMSNotifier("x") != PushNotifier("x")
    assert len({SMSNotifier("x"), SMSNotifier("x")}) == 1


def test_repeated_sends_are_independent(sink) -> None:
    notifier = SMSNotifier("+1234567890", sink=sink)
    notifier.send("Hello")
    notifier.send("Hello")

    assert len(sink.lines) == 2
