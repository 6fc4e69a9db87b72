from rich.prompt import Prompt


class Listener:
    def __init__(self, console=None):
        self.console = console

    def read(self, prompt="[info]>[/info]"):
        """
        Blocks for one line of input and returns it trimmed.
        End of input raises EOFError; the caller treats that as fatal.
        """
        answer = Prompt.ask(prompt, console=self.console)
        return answer.strip()
