from calculator_keys import parse_sequence
from keypad_engine import KeypadCalculatorEngine, NoOperationError
import sys


def _walk(sequence: str, *, fraction_digits: int = 15):
	engine = KeypadCalculatorEngine(fraction_digits=fraction_digits)
	states = []

	for key in parse_sequence(sequence):
		states.append((key, engine.handle(key)))

	return engine, states


def _run(sequence: str) -> str:
	engine, _ = _walk(sequence)
	return engine.display_text


def inspect_key_states(sequence: str, *, fraction_digits: int = 15) -> None:
	"""Imprime la pantalla tras cada tecla de la secuencia."""
	engine, states = _walk(sequence, fraction_digits=fraction_digits)

	print("Key inspection")
	print(f"keys:            {sequence}")
	print(f"fraction digits: {fraction_digits}")
	print(f"total keys:      {len(states)}")

	for i, (key, text) in enumerate(states, start=1):
		print(f"  {i}. {key.name:<12} {text}")

	snapshot = engine.snapshot()
	print(f"pending:         {snapshot.pending_operation}")
	print(f"state:           {snapshot.state.name}")
	print(f"final text:      {snapshot.display_text}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for sequence, expected in (
		("1.5+2.5=", "4"),
		("5+=", "10"),
		("50%", "0.5"),
		("4+%", "0.16"),
		("0.1+0.2=", "0.3"),
		("5÷0=", "inf"),
		("5.000000000000001+0=", "5.000000000000001"),
		("1%%%5", "0.0000015"),
		("10000000000000000+=", "20000000000000000"),
		("0÷0=", "nan"),
		("5±÷0=", "-inf"),
		("200+5%", "10"),
	):
		expected_actual.append((sequence, expected, _run(sequence)))

	checks.append(("typed digits shown verbatim", _run("9081726354") == "9081726354"))
	checks.append(("clear returns to 0", _run("12+7AC") == "0"))
	checks.append(("sign toggle on 0 is a no-op", _run("±") == "0"))
	checks.append(("sign toggle twice restores value", _run("5±±") == "5"))
	checks.append(("second dot is ignored", _run("1..5") == "1.5"))
	checks.append(("dot on empty buffer shows 0.", _run(".") == "0."))
	checks.append(("unknown key shows 0", _run("12?") == "0"))
	checks.append(("equals without operator keeps display", _run("7=") == "7"))

	engine, _ = _walk("8×")
	engine.handle(parse_sequence("3")[0])
	engine.handle(parse_sequence("+")[0])
	checks.append((
		"second operator overwrites pending without computing",
		engine.first_operand == "8" and engine.second_operand == "3"
		and engine.handle(parse_sequence("=")[0]) == "11",
	))

	strict = KeypadCalculatorEngine()
	try:
		strict.press(parse_sequence("=")[0])
		raised = False
	except NoOperationError:
		raised = True
	checks.append(("press() raises on equals without operator", raised))

	coarse, _ = _walk("2÷3=", fraction_digits=2)
	expected_actual.append(("2÷3= with 2 fraction digits", "0.67", coarse.display_text))

	for label, expected, actual in expected_actual:
		checks.append((f"{label} -> {expected}", expected == actual))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_keypad_checks.py
	#   python regression_keypad_checks.py --inspect "1.5+2.5="
	#   python regression_keypad_checks.py --inspect "2÷3=" --digits 4
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		def _read_int(flag: str, default: int) -> int:
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return int(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit(f"Invalid value for {flag}")

		inspect_key_states(sequence, fraction_digits=_read_int("--digits", 15))
	else:
		run_regressions()
