"""
Tests for the debug rendering and the demo program.
"""

import io

from tinymatrix import Matrix
from tinymatrix.demo import main, run


class TestRender:

    def test_two_decimals_and_trailing_blank_line(self, square_2x2):
        assert square_2x2.render() == "1.00 2.00 \n3.00 4.00 \n\n"

    def test_custom_decimals(self):
        m = Matrix.from_values(1, 2, [1.0 / 3.0, -2.5])
        assert m.render(decimals=3) == "0.333 -2.500 \n\n"

    def test_empty_matrix(self):
        assert Matrix.new(0, 0).render() == "\n"

    def test_str_matches_render(self, square_2x2):
        assert str(square_2x2) == square_2x2.render()

    def test_print_matrix_to_file(self, square_2x2):
        buf = io.StringIO()
        square_2x2.print_matrix(file=buf)
        assert buf.getvalue() == square_2x2.render()

    def test_print_matrix_to_stdout(self, square_2x2, capsys):
        square_2x2.print_matrix()
        assert capsys.readouterr().out == "1.00 2.00 \n3.00 4.00 \n\n"

    def test_repr(self, square_2x2):
        assert repr(square_2x2) == "Matrix.from_values(2, 2, [1.0, 2.0, 3.0, 4.0])"


class TestDemo:

    def test_run_output(self):
        buf = io.StringIO()
        run(out=buf)
        output = buf.getvalue()
        assert output.startswith("1.00 2.00 3.00 \n-2.00 -1.00 10.00 \n5.00 6.00 -1.50 \n\n")
        assert "[1.0, -1.0, -1.5]\n" in output
        assert "True\n" in output
        # Product of [[1, 2], [4, 5]] and [[5, 6], [8, 9]]
        assert "21.00 24.00 \n60.00 69.00 \n\n" in output
        assert output.endswith("1.00 2.00 5.00 6.00 \n4.00 5.00 8.00 9.00 \n\n")

    def test_main(self, capsys):
        assert main(["--decimals", "1"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("1.0 2.0 3.0 \n")
