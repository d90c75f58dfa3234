import sys

from tinysh.status import fatal

READ_BUFSIZE = 1024


class LineReader:
    """
    Read one line at a time from a text stream.
    Interactive readers go through input() so readline editing and history apply.
    """

    def __init__(self, stream=None, out=None, bufsize=READ_BUFSIZE, interactive=False):
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.bufsize = bufsize
        self.interactive = interactive
        self.eof = False

    def read_line(self, prompt=""):
        """
        Return the next line without its newline.
        At end of stream, return what was read so far (possibly "") and set eof.
        """
        if self.interactive:
            return self._read_interactive(prompt)

        if prompt:
            self.out.write(prompt)
            self.out.flush()

        try:
            chunks = []
            while True:
                chunk = self.stream.readline(self.bufsize)
                if not chunk:
                    self.eof = True
                    break
                if chunk.endswith("\n"):
                    chunks.append(chunk[:-1])
                    break
                chunks.append(chunk)
            return "".join(chunks)
        except MemoryError:
            fatal("allocation error")

    def _read_interactive(self, prompt):
        try:
            return input(prompt)
        except EOFError:
            print()
            self.eof = True
            return ""
        except MemoryError:
            fatal("allocation error")
