"""Worked solutions to a set of small exercises."""