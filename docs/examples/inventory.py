import seqops


stock = [
    ("apple", "fruit", 12),
    ("carrot", "vegetable", 0),
    ("pear", "fruit", 3),
    ("leek", "vegetable", 7),
    ("plum", "fruit", 0),
]

in_stock = seqops.sfilter(lambda item: item[2] > 0, stock)
by_category = seqops.group_map(lambda item: item[1], lambda item: item[0], in_stock)
print(by_category)

largest = seqops.most(lambda item, best: item[2] > best[2], stock)
print("largest stock:", largest[0])

total = seqops.reduce(lambda item, acc: acc + item[2], stock, 0)
print("total units:", total)

names = seqops.smap(lambda item: item[0], stock)
seqops.sort(lambda a, b: a < b, names)
for page in seqops.chunk(names, 2):
    print(", ".join(page))

i = seqops.find_index(lambda item: item[0] == "kiwi", stock)
print("kiwi", "found" if i >= 0 else "missing")
