import io

import pytest
from config import InterpreterConfig, LoopPolicy, from_args
import main


def test_run_prints_variable_listing(capsys):
    status = main.run("clear x; while x not 3 do; incr x; end; decr y;")
    assert status == 0
    assert capsys.readouterr().out == "x= 3\ny= -1\n"


def test_run_reports_residual_loops(capsys):
    main.run("while x not 3 do; incr x;")
    out = capsys.readouterr().out
    assert out == "x= 1\nloop{counter=x,bound=3,lineNumber=1}\n"


def test_run_reports_runtime_error(capsys):
    status = main.run("incr x; end;")
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("Runtime Error at line 2: ")
    assert out.endswith("x= 1\n")


def test_run_reports_parser_error(capsys):
    status = main.run("incr x; while x not y do;")
    assert status == 1
    assert capsys.readouterr().out.startswith("Parser Error: line 2: ")


def test_run_verbose(capsys):
    main.run("incr x;", InterpreterConfig(verbose=True))
    out = capsys.readouterr().out
    assert 'processing statement "incr x" at line 1: ' in out
    assert out.endswith("final results:\nx= 1\n")


def test_run_trace_table(capsys):
    main.run("incr x; incr x;", trace_table=True)
    out = capsys.readouterr().out
    assert out.startswith("x= 2\n\n+")
    assert "| Step | Line |" in out


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "count.bb"
    path.write_text("clear x;\nwhile x not 2 do;\n    incr x;\nend;\n", encoding="utf-8")
    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == "x= 2\n"


def test_main_max_steps(tmp_path, capsys):
    path = tmp_path / "forever.bb"
    path.write_text("while x not 1 do; incr x; incr x; end;", encoding="utf-8")
    assert main.main([str(path), "--max-steps", "50"]) == 1
    assert "Runtime Error" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.bb")]) == 2
    assert capsys.readouterr().out.startswith("Error: cannot read")


def test_main_rejects_negative_budget(tmp_path, capsys):
    path = tmp_path / "p.bb"
    path.write_text("incr x;", encoding="utf-8")
    assert main.main([str(path), "--max-steps", "-1"]) == 2


def test_arg_parser_builds_config():
    args = main.build_arg_parser().parse_args(["prog.bb", "-v", "--loop-policy", "repush"])
    config = from_args(args)
    assert config.verbose is True
    assert config.loop_policy is LoopPolicy.REPUSH
    assert config.max_steps is None


def test_config_accepts_policy_name():
    assert InterpreterConfig(loop_policy="stable").loop_policy is LoopPolicy.STABLE
    with pytest.raises(ValueError):
        InterpreterConfig(max_steps=-5)


def test_repl_session(capsys):
    stdin = io.StringIO("clear x;\nwhile x not 2 do;\nincr x;\nend;\nend;\nquit;\n")
    main.repl(stdin=stdin)
    out = capsys.readouterr().out
    assert out.startswith("Welcome to the bare bones interpreter!")
    assert "    loop{counter=x,bound=2,lineNumber=2}\n" in out
    assert "Runtime Error at line 5: " in out
    assert out.rstrip().endswith("Thank you for using bare bones interpreter!")
    assert out.count("    x= 2\n") == 2
    assert "Runtime Error at line 5: 'end' has no matching 'while'\n" in out


def test_repl_statement_split_across_lines(capsys):
    main.repl(stdin=io.StringIO("while x not\n2 do;\nincr x;\nend;\nquit;\n"))
    out = capsys.readouterr().out
    assert "Parser Error" not in out
    assert "    x= 2\n" in out


def test_repl_unterminated_input_at_eof(capsys):
    main.repl(stdin=io.StringIO("incr x;\nincr"))
    out = capsys.readouterr().out
    assert out.count("    x= 1\n") == 2
    assert "x= 2" not in out


def test_run_error_names_the_line_once(capsys):
    main.run("incr x; end;")
    first = capsys.readouterr().out.splitlines()[0]
    assert first == "Runtime Error at line 2: 'end' has no matching 'while'"
    assert first.count("line") == 1
