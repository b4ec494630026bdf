
class BSTError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidKeyError(BSTError):
    def __str__(self):
        return "invalid key: " + repr(self.args[0])

class NodeNotInTreeError(BSTError):
    def __str__(self):
        return "node " + repr(self.args[0]) + " is not a member of this tree"

class ParseError(BSTError):
    pass

class DotExportError(BSTError):
    def __init__(self, filename, msg):
        super(DotExportError, self).__init__(filename, msg)
        self.filename = filename
        self.msg = msg
    def __str__(self):
        return "unable to write " + self.filename + ": " + str(self.msg)
