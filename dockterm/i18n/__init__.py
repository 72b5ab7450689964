"""Translated UI strings in nine languages and selection of a language's set."""