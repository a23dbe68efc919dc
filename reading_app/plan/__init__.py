"""
Plan model, text parser and cursor navigation.

Plans move between entries; acyclic plans can fall off either end into
BeforeStart / AfterEnd, cyclic plans wrap around.
"""
