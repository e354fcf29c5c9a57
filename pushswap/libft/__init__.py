"""Small character, string, formatting, output and linked-list helpers."""