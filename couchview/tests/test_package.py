# -*- coding: utf-8 -*-

import unittest
import couchview


class TestPackage(unittest.TestCase):

    def test_exports(self):
        expected = set([
            # couchview.client
            'Server', 'Database', 'Document',
            # couchview.views
            'ViewQuery', 'ViewResult', 'Row',
            # couchview.policy
            'AbortOnError',
            'exceptions',
        ])
        exported = set(e for e in dir(couchview) if not e.startswith('_'))
        self.assertTrue(expected <= exported)


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(TestPackage))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
