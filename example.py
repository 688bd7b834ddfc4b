from ifsc_bharat import BankSearchParams, IFSCBharat

print(IFSCBharat.__version__)  # 0.1.0

# Default usage: Razorpay IFSC API + bundled branch directory
ifsc = IFSCBharat()

# Single-field lookup (input is upper-cased before validation)
record = ifsc.lookup("hdfc0000053")
if record is None:
    print("Failed to fetch bank details. Please try again.")
else:
    print(record.bank, record.branch, record.payment_methods)
    print(ifsc.readout_text(record))

# Customer support email for an exact bank name
print(ifsc.support_email("State Bank of India"))  # customercare@sbi.co.in

# Bank -> State -> District -> Branch search needs a loaded directory
print(ifsc.search_notice())
if record is not None:
    ifsc.remember(record)
print(ifsc.banks())
print(
    ifsc.find_ifsc(
        BankSearchParams(
            bank="HDFC Bank",
            state="KARNATAKA",
            district="BANGALORE URBAN",
            branch="BANGALORE - KORAMANGALA",
        )
    )
)

# Seed the directory from Razorpay's IFSC.csv release
# from ifsc_bharat import seed_branch_directory
# seed_branch_directory("IFSC.csv")
