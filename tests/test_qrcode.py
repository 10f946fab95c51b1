from barcodekit.core import BLACK, TYPE_QR, WHITE
from barcodekit.qr.qrcode import QRCode


def test_new_qrcode():
    bc = QRCode(2)
    assert len(bc.data) == 4
    assert bc.dimension == 2


def test_basics():
    qr = QRCode(10)
    assert qr.color.model == "gray16"
    assert qr.bounds() == (0, 0, 10, 10)
    assert qr.metadata().dimensions == 2
    assert qr.metadata().code_kind == TYPE_QR
    qr.set(0, 0, True)
    assert qr.get(0, 0)
    assert not qr.get(0, 7)
    assert qr.at(0, 0) == BLACK
    assert qr.at(0, 7) == WHITE


def test_set_uses_column_major_layout():
    qr = QRCode(3)
    qr.set(1, 2, True)
    assert qr.data.get_bit(1 * 3 + 2)
    assert not qr.get(2, 1)


def test_penalty_total_is_sum_of_rules():
    qr = QRCode(12)
    for x, y in [(0, 0), (1, 3), (5, 5), (7, 2), (11, 11), (4, 9)]:
        qr.set(x, y, True)
    expected = qr.penalty_rule1() + qr.penalty_rule2() + qr.penalty_rule3() + qr.penalty_rule4()
    assert qr.calc_penalty() == expected


def test_penalty1():
    qr = QRCode(7)
    assert qr.penalty_rule1() == 70
    qr.set(0, 0, True)
    assert qr.penalty_rule1() == 68
    qr.set(0, 6, True)
    assert qr.penalty_rule1() == 66


def test_penalty2():
    qr = QRCode(3)
    assert qr.penalty_rule2() == 12
    qr.set(0, 0, True)
    qr.set(1, 1, True)
    qr.set(2, 0, True)
    assert qr.penalty_rule2() == 0
    qr.set(1, 1, False)
    assert qr.penalty_rule2() == 6


def test_penalty3_finds_pattern():
    qr = QRCode(11)
    pattern = [True, False, True, True, True, False, True, False, False, False, False]
    for i, value in enumerate(pattern):
        qr.set(i, 0, value)
    assert qr.penalty_rule3() == 40


def test_penalty3_empty_grid():
    assert QRCode(11).penalty_rule3() == 0


def test_penalty4():
    qr = QRCode(3)
    assert qr.penalty_rule4() == 100
    qr.set(0, 0, True)
    assert qr.penalty_rule4() == 70
    qr.set(0, 1, True)
    assert qr.penalty_rule4() == 50
    qr.set(0, 2, True)
    assert qr.penalty_rule4() == 30
    qr.set(1, 0, True)
    assert qr.penalty_rule4() == 10
    qr.set(1, 1, True)
    assert qr.penalty_rule4() == 10
    qr = QRCode(2)
    qr.set(0, 0, True)
    qr.set(1, 0, True)
    assert qr.penalty_rule4() == 0