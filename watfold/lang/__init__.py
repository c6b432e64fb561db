""" Source text helpers shared by the readers. """
