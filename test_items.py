import unittest

from adventure.items import Key, Coin, coin_total, has_key, collapse_coins


class TestItems(unittest.TestCase):
    def test_coin_total_sums_every_stack(self):
        inventory = [Coin(5), Key(), Coin(2), Key(), Coin(0)]
        self.assertEqual(coin_total(inventory), 7)

    def test_coin_total_ignores_order(self):
        inventory = [Coin(1), Key(), Coin(4), Coin(10)]
        self.assertEqual(coin_total(inventory), coin_total(list(reversed(inventory))))

    def test_coin_total_of_empty_and_keys_only(self):
        self.assertEqual(coin_total([]), 0)
        self.assertEqual(coin_total([Key(), Key()]), 0)

    def test_has_key(self):
        self.assertTrue(has_key([Coin(3), Key()]))
        self.assertFalse(has_key([Coin(3)]))
        self.assertFalse(has_key([]))

    def test_items_compare_by_kind_and_amount(self):
        self.assertEqual(Key(), Key())
        self.assertEqual(Coin(2), Coin(2))
        self.assertNotEqual(Coin(2), Coin(3))
        self.assertNotEqual(Coin(0), Key())
        self.assertEqual(repr([Key(), Coin(4)]), "[Key(), Coin(4)]")

    def test_negative_coin_rejected(self):
        with self.assertRaises(ValueError):
            Coin(-1)

    def test_collapse_coins_keeps_keys_in_place(self):
        inventory = [Coin(2), Key(), Coin(6)]
        collapse_coins(inventory, 3)
        self.assertEqual(inventory, [Key(), Coin(3)])


if __name__ == '__main__':
    unittest.main()
