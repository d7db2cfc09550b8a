import io

from mediasearch.process import (
    ChannelMode,
    ContextState,
    DebugPrinter,
    ExitStatus,
    ProcessChannel,
    ProcessExitState,
    ProcessOutputChannels,
    format_debug_value,
)


def test_success_requires_zero_and_normal_exit():
    assert ProcessExitState(False, 0, 10, ExitStatus.NORMAL_EXIT).success() is True
    assert ProcessExitState(False, 1, 10, ExitStatus.NORMAL_EXIT).success() is False
    assert ProcessExitState(False, 0, 10, ExitStatus.CRASH_EXIT).success() is False


def test_exit_state_keeps_fields():
    state = ProcessExitState(True, -1, -1, ExitStatus.NORMAL_EXIT)
    assert state.cancelled is True
    assert state.exit_code == -1
    assert state.duration == -1


def test_default_channels_are_merged():
    channels = ProcessOutputChannels()
    assert channels.channel_mode is ChannelMode.MERGED_CHANNELS
    assert channels.channel is None


def test_named_channel_is_separate():
    channels = ProcessOutputChannels(ProcessChannel.STANDARD_OUTPUT)
    assert channels.channel_mode is ChannelMode.SEPARATE_CHANNELS
    assert channels.channel is ProcessChannel.STANDARD_OUTPUT


def test_context_state_defaults_and_setters():
    state = ContextState()
    assert state.none_are_running is True
    assert state.finished_success is False
    assert state.clear is False
    state.set_clear()
    state.set_show_log_window()
    assert state.clear is True
    assert state.show_log_window is True


def test_context_state_constructor_values():
    state = ContextState(False, True)
    assert state.none_are_running is False
    assert state.finished_success is True


def test_format_empty_list():
    assert format_debug_value([]) == "()"


def test_format_list_quotes_items():
    assert format_debug_value(["a", "b"]) == '("a", "b")'


def test_format_bytes_and_strings():
    assert format_debug_value(b"data") == "data"
    assert format_debug_value("text") == "text"


def test_debug_switch_prints_to_out():
    out, err = io.StringIO(), io.StringIO()
    printer = DebugPrinter("--debug", out=out, err=err)
    result = printer.write("hello").write(["x"])
    assert result is printer
    assert out.getvalue() == 'hello\n("x")\n'
    assert err.getvalue() == ""


def test_qdebug_switch_prints_to_err():
    out, err = io.StringIO(), io.StringIO()
    DebugPrinter("--qdebug", out=out, err=err).write("hello")
    assert err.getvalue() == "hello\n"
    assert out.getvalue() == ""


def test_no_switch_prints_nothing():
    out, err = io.StringIO(), io.StringIO()
    DebugPrinter("", out=out, err=err).write("hello")
    DebugPrinter("--other", out=out, err=err).write("hello")
    assert out.getvalue() == ""
    assert err.getvalue() == ""