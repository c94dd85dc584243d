import unittest
import shapenotation
from shapenotation import Container, Shape, ShapeKind


class TestParsing(unittest.TestCase):
    def setUp(self):
        self.parser = shapenotation.ShapeParser()

    def test_basic_square(self):
        result = self.parser.parse("[12]")
        self.assertIsInstance(result, Container)
        self.assertEqual(len(result.shapes), 1)
        self.assertIs(result.shapes[0].kind, ShapeKind.SQUARE)
        self.assertTrue(result.shapes[0].is_square)
        self.assertEqual(result.shapes[0].label, "12")
        self.assertEqual(result.shapes[0].children, ())

    def test_basic_circle(self):
        result = self.parser.parse("(ABC)")
        self.assertEqual(len(result.shapes), 1)
        self.assertIs(result.shapes[0].kind, ShapeKind.CIRCLE)
        self.assertTrue(result.shapes[0].is_circle)
        self.assertEqual(result.shapes[0].label, "ABC")
        self.assertEqual(result.shapes[0].children, ())

    def test_nested_squares(self):
        result = self.parser.parse("[1[2[3]]]")
        self.assertEqual(len(result.shapes), 1)
        one = result.shapes[0]
        two = one.children[0]
        three = two.children[0]
        self.assertEqual(
            [s.label for s in (one, two, three)], ["1", "2", "3"]
        )
        self.assertTrue(all(s.is_square for s in (one, two, three)))
        self.assertEqual(three.children, ())

    def test_nested_circles(self):
        result = self.parser.parse("(A(B(C)))")
        self.assertEqual(len(result.shapes), 1)
        a = result.shapes[0]
        self.assertEqual(a.label, "A")
        self.assertEqual(a.children[0].label, "B")
        self.assertEqual(a.children[0].children[0].label, "C")
        self.assertTrue(a.children[0].children[0].is_circle)

    def test_complex_structure(self):
        result = self.parser.parse("[12](BALL(INK[1[35]](CHARLIE)))")
        self.assertEqual(len(result.shapes), 2)
        square, ball = result.shapes
        self.assertTrue(square.is_square)
        self.assertEqual(square.label, "12")
        self.assertTrue(ball.is_circle)
        self.assertEqual(ball.label, "BALL")

        ink = ball.children[0]
        self.assertTrue(ink.is_circle)
        self.assertEqual(ink.label, "INK")
        self.assertEqual(len(ink.children), 2)
        self.assertTrue(ink.children[0].is_square)
        self.assertEqual(ink.children[0].label, "1")
        self.assertEqual(ink.children[0].children[0].label, "35")
        self.assertTrue(ink.children[0].children[0].is_square)
        self.assertTrue(ink.children[1].is_circle)
        self.assertEqual(ink.children[1].label, "CHARLIE")

        expected = Container(
            [
                Shape.square("12"),
                Shape.circle(
                    "BALL",
                    [
                        Shape.circle(
                            "INK",
                            [
                                Shape.square("1", [Shape.square("35")]),
                                Shape.circle("CHARLIE"),
                            ],
                        )
                    ],
                ),
            ]
        )
        self.assertEqual(result, expected)

    def test_square_inside_circle(self):
        result = self.parser.parse("(A[1])")
        self.assertEqual(len(result.shapes), 1)
        self.assertEqual(result.shapes[0].label, "A")
        self.assertEqual(len(result.shapes[0].children), 1)
        self.assertTrue(result.shapes[0].children[0].is_square)
        self.assertEqual(result.shapes[0].children[0].label, "1")

    def test_empty_input(self):
        result = self.parser.parse("")
        self.assertIsInstance(result, Container)
        self.assertEqual(len(result.shapes), 0)
        self.assertEqual(list(result), [])

    def test_multiple_top_level(self):
        result = self.parser.parse("[1](A)[2](B)")
        self.assertEqual(len(result), 4)
        self.assertEqual(
            [(s.kind, s.label) for s in result],
            [
                (ShapeKind.SQUARE, "1"),
                (ShapeKind.CIRCLE, "A"),
                (ShapeKind.SQUARE, "2"),
                (ShapeKind.CIRCLE, "B"),
            ],
        )

    def test_sibling_children_keep_order(self):
        result = self.parser.parse("(X[3][1](Y)[2])")
        self.assertEqual(
            [c.label for c in result[0].children], ["3", "1", "Y", "2"]
        )

    def test_top_level_count(self):
        for text, count in [
            ("[1]", 1),
            ("[1][2[3]]", 2),
            ("(A)(B[1])(C(D))", 3),
            ("[0](Z)[99][7[7]]", 4),
        ]:
            with self.subTest(text=text):
                self.assertEqual(len(self.parser.parse(text)), count)

    def test_idempotent(self):
        text = "[12](BALL(INK[1[35]](CHARLIE)))"
        first = self.parser.parse(text)
        second = self.parser.parse(text)
        fresh = shapenotation.ShapeParser().parse(text)
        self.assertEqual(first, second)
        self.assertEqual(first, fresh)
        self.assertEqual(hash(first), hash(fresh))
        self.assertIsNot(first.shapes[0], second.shapes[0])

    def test_parser_reuse_after_error(self):
        with self.assertRaises(shapenotation.ParsingError):
            self.parser.parse("[1")
        self.assertEqual(
            self.parser.parse("[1]"), Container([Shape.square("1")])
        )

    def test_module_parse(self):
        self.assertEqual(
            shapenotation.parse("(A[1])"),
            Container([Shape.circle("A", [Shape.square("1")])]),
        )

    def test_parse_result_success(self):
        result = self.parser.parse_result("[1](A)")
        self.assertIsInstance(result, Container)
        self.assertEqual(result, self.parser.parse("[1](A)"))

    def test_verbose_trace(self):
        import contextlib
        import io

        parser = shapenotation.ShapeParser(verbose=True)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            parser.parse("(A[1])")
        self.assertEqual(
            out.getvalue().splitlines(),
            [
                "OPEN  circle 'A' at offset 0",
                "  OPEN  square '1' at offset 2",
                "  CLOSE square '1' at offset 4",
                "CLOSE circle 'A' at offset 5",
            ],
        )


if __name__ == "__main__":
    unittest.main()
