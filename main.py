from promptsim.core.session import load_example, new_session, submit
from promptsim.tools.cli import format_evaluation, format_history


def main():
    state = load_example(new_session())
    state = submit(state)

    print(state.response)
    print()
    print(format_evaluation(state.evaluation))

    # A weak prompt for contrast
    state = submit(state, "Háblame de algoritmos.")
    print()
    print(state.response)
    print()
    print(format_history(state.history))


if __name__ == "__main__":
    main()
