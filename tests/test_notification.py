import pytest

from quantum_labels.notification import Notification, Notifier


class TestNotifier:

    def test_starts_empty(self, clock):
        notifier = Notifier(clock=clock)
        assert notifier.current() == Notification()
        assert not notifier.current()

    def test_success_expires_after_five_seconds(self, clock):
        notifier = Notifier(clock=clock)
        notifier.notify("Etiquetas impressas com sucesso!", "success")
        clock.advance_ms(4999)
        assert notifier.current() == Notification("Etiquetas impressas com sucesso!", "success")
        clock.advance_ms(1)
        assert notifier.current() == Notification()

    def test_danger_expires_after_three_seconds(self, clock):
        notifier = Notifier(clock=clock)
        notifier.notify("Cabeçalho faltando: sku", "danger")
        clock.advance_ms(2999)
        assert notifier.current().severity == "danger"
        clock.advance_ms(1)
        assert not notifier.current()

    def test_newer_notification_preempts_older_deadline(self, clock):
        notifier = Notifier(clock=clock)
        notifier.notify("first", "danger")
        clock.advance_ms(2000)
        notifier.notify("second", "success")
        # the first deadline passes but must not clear the second message
        clock.advance_ms(1500)
        assert notifier.current().message == "second"
        clock.advance_ms(3500)
        assert not notifier.current()

    def test_custom_lifetimes(self, clock):
        notifier = Notifier(lifetimes_ms={"info": 500}, clock=clock)
        notifier.notify("hello", "info")
        assert notifier.remaining_seconds() == pytest.approx(0.5)
        clock.advance_ms(500)
        assert not notifier.current()

    def test_clear(self, clock):
        notifier = Notifier(clock=clock)
        notifier.notify("hello", "info")
        notifier.clear()
        assert not notifier.current()
        assert notifier.remaining_seconds() == 0.0

    def test_unknown_severity(self, clock):
        with pytest.raises(ValueError):
            Notifier(clock=clock).notify("hello", "warning")
